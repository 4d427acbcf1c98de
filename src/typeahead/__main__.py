from typeahead.cli import main

main()
