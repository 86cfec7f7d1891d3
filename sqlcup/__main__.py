from sqlcup.cli.generator import main

main()
