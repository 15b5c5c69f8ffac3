from .scripts.ivs import main

main()
