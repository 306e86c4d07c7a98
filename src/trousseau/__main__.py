from trousseau.cli.app import main

main()
