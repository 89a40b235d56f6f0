import sys

from prompt_as_code.cli import main

sys.exit(main())
