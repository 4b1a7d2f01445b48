import sys

from claude_statusline.cli.main import main

sys.exit(main())
