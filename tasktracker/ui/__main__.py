from tasktracker.ui.console import main


main()
