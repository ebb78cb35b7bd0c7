from gobblet_terminal.main import main

main()
