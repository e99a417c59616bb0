from trackerbot.cli.main import main

main()
