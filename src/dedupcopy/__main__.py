from dedupcopy.cli import main

main()
