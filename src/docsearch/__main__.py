from docsearch.cli import main

main()
