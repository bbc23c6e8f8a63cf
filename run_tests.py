import os
import sys
import unittest

if os.path.exists(os.sep.join([os.getcwd(), 'scriptasm'])):
    sys.path.insert(0, os.getcwd())

result = unittest.TextTestRunner().run(unittest.TestLoader().discover('tests'))
sys.exit(0 if result.wasSuccessful() else 1)
