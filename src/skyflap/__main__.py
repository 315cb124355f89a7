from skyflap.main import main

main()
