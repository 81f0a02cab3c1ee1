from autotag.cli.app import main

main()
