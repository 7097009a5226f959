"""
This is the main file to run the game.
It imports the main function from the space_shooter app and runs it.
"""

import sys

from space_shooter.app import main

if __name__ == "__main__":
    sys.exit(main())
