from kytt.commands import main

main()
