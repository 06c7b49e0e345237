import os
import sys
from mypy import api

# Ensure repository root is in sys.path so mcs96 can be imported when the
# script is run from the 'scripts' directory.
root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.append(root)

targets = sys.argv[1:] or [os.path.join(root, "mcs96")]
stdout, stderr, exit_status = api.run(targets)
print(stdout, end="")
print(stderr, end="", file=sys.stderr)
sys.exit(exit_status)
