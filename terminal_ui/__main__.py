from terminal_ui.main import main

main()
