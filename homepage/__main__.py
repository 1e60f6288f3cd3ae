from homepage.serve import main

main()
