from llm_labs.cli import main

main()
