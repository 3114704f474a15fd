import os
import sys

# Add src to path
SRC = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src'))
if SRC not in sys.path:
	sys.path.insert(0, SRC)

EVALUATION = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'evaluation'))
if EVALUATION not in sys.path:
	sys.path.insert(0, EVALUATION)
