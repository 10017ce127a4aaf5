"""Provide utility functions used by the various tools in this
package.

"""

from . import words
