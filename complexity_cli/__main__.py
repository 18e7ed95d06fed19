from complexity_cli.cli import main

main()
