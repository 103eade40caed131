from protodice.app.demo import main

main()
