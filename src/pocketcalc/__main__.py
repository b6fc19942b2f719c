"""Command-line interface: `python -m pocketcalc` opens the calculator window."""
from pocketcalc.main import main

if __name__ == "__main__":
    main()
