import sys

from perplexity_mcp.main import main

sys.exit(main())
