"""GitHub REST and Actions runner adapters."""
