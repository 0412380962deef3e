from grdeval.cli import main

main()
