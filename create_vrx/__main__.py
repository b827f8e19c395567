from create_vrx.cli import main

main()
