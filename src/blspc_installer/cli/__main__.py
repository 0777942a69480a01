from blspc_installer.cli import cli_main

cli_main()
