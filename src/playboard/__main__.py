from playboard.board import main

main()
