"""`python -m postboard` serves the API."""

from postboard.main import main

main()
