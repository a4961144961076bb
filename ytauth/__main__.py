from ytauth.cli.main import main

main()
