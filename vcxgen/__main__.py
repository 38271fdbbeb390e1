from vcxgen.generator import main

main()
