from openwsdl.cli import main

main()
