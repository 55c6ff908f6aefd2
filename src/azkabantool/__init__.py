"""
AzkabanTool - Scaffold, package and run Azkaban job collections

A small command line tool that:
- create: renders collection and flow directories from job templates
- upload: zips a collection and uploads it as an Azkaban project
- execute: uploads a collection and triggers its final job flow
"""

from .version import __version__

__author__ = "suchunsv"
__email__ = "suchunsv@outlook.com"
__license__ = "MIT"
__description__ = "Scaffold, package and run Azkaban job collections"

__all__ = [
    "__version__",
]
