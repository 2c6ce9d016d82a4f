from sparse_life.cli import main

main()
