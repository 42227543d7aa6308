from crdpmap.apps.cli.app import main_entry

main_entry()
