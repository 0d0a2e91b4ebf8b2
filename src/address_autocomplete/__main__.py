from address_autocomplete.server import main

main()
