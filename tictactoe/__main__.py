import sys

from tictactoe.main import main

sys.exit(main())
