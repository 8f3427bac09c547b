# src/todo_calendar/__main__.py

from .cli.main import main

main()
