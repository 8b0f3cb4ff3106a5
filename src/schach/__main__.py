from schach.app import main

main()
