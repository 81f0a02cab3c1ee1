"""GitHub REST adapter for the release flow.

Endpoints used:
- GET  /repos/{owner}/{repo}/releases/latest
- GET  /repos/{owner}/{repo}/compare/{base}...{head}  (paginated)
- POST /repos/{owner}/{repo}/releases
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote

from autotag.core.config import DEFAULT_API_URL
from autotag.core.result import Err, Ok, Result
from autotag.core.structured import as_str_dict, get_list, get_raw_str, get_table
from autotag.github.http import HttpClient
from autotag.release.errors import ReleaseError
from autotag.release.model import RepoIdentity

__all__ = ["COMMITS_PAGE_SIZE", "MAX_COMMIT_PAGES", "GitHubReleaseBackend"]

COMMITS_PAGE_SIZE = 100
# Upper bound on followed rel="next" links.
MAX_COMMIT_PAGES = 1000


@dataclass(frozen=True, slots=True)
class GitHubReleaseBackend:
    http: HttpClient
    api_url: str = DEFAULT_API_URL
    page_size: int = COMMITS_PAGE_SIZE

    def _repo_url(self, identity: RepoIdentity) -> str:
        owner = quote(identity.owner, safe="")
        repo = quote(identity.repo, safe="")
        return f"{self.api_url.rstrip('/')}/repos/{owner}/{repo}"

    def get_latest_tag(self, identity: RepoIdentity) -> Result[str, ReleaseError]:
        url = f"{self._repo_url(identity)}/releases/latest"
        result = self.http.get_json(url)
        if isinstance(result, Err):
            return Err(
                ReleaseError(
                    kind="tag_fetch",
                    message=f"failed to fetch latest release of {identity}: {result.error}",
                    hint="a published (non-draft, non-prerelease) release is required",
                )
            )

        data = as_str_dict(result.value.data)
        tag = get_raw_str(data, "tag_name") if data is not None else None
        if tag is None:
            return Err(
                ReleaseError(
                    kind="tag_fetch",
                    message=f"latest release payload of {identity} has no tag_name ({url})",
                )
            )
        return Ok(tag)

    def list_commits_between(
        self,
        identity: RepoIdentity,
        base: str,
        head: str = "HEAD",
    ) -> Result[list[str], ReleaseError]:
        basehead = f"{quote(base, safe='')}...{quote(head, safe='')}"
        url: str | None = (
            f"{self._repo_url(identity)}/compare/{basehead}?per_page={self.page_size}"
        )

        messages: list[str] = []
        pages = 0
        while url is not None:
            if pages >= MAX_COMMIT_PAGES:
                return Err(
                    ReleaseError(
                        kind="commit_fetch",
                        message=f"commit pagination exceeded {MAX_COMMIT_PAGES} pages: {url}",
                    )
                )
            result = self.http.get_json(url)
            if isinstance(result, Err):
                return Err(
                    ReleaseError(
                        kind="commit_fetch",
                        message=f"failed to list commits {base}...{head} of {identity}: "
                        f"{result.error}",
                    )
                )
            page = _page_messages(result.value.data)
            if page is None:
                return Err(
                    ReleaseError(
                        kind="commit_fetch",
                        message=f"unexpected compare payload for {identity} ({url})",
                    )
                )
            messages.extend(page)
            pages += 1
            url = result.value.next_url

        return Ok(messages)

    def create_release(self, identity: RepoIdentity, tag: str) -> Result[None, ReleaseError]:
        url = f"{self._repo_url(identity)}/releases"
        result = self.http.post_json(url, {"tag_name": tag, "generate_release_notes": True})
        if isinstance(result, Err):
            return Err(
                ReleaseError(
                    kind="release_creation",
                    message=f"failed to create release {tag} for {identity}: {result.error}",
                )
            )
        return Ok(None)


def _page_messages(data: object) -> list[str] | None:
    """Commit messages of one compare page, in the order returned."""
    table = as_str_dict(data)
    if table is None:
        return None
    commits = get_list(table, "commits")
    if commits is None:
        return None

    out: list[str] = []
    for item in commits:
        entry = as_str_dict(item)
        commit = get_table(entry, "commit") if entry is not None else None
        message = get_raw_str(commit, "message") if commit is not None else None
        if message is None:
            return None
        out.append(message)
    return out
