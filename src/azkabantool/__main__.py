from azkabantool.cli import main

main()
