from lana.main import main


main()
