import sys
import os.path
import sphinx_rtd_theme

sys.path.append(os.path.abspath('.'))
sys.path.append(os.path.abspath('doc'))

import buoyplan

extensions = [
    'sphinx.ext.autodoc', 'sphinx.ext.autosummary', 'sphinx.ext.doctest',
    'sphinx.ext.todo', 'sphinx.ext.viewcode', 'sphinx.ext.mathjax'
]
project = 'buoyplan'
source_suffix = '.rst'
master_doc = 'index'

version = release = buoyplan.__version__
copyright = 'BuoyPlan Team'

epub_basename = 'buoyplan - {}'.format(version)
epub_author = 'BuoyPlan Team'

todo_include_todos = True

html_theme = 'sphinx_rtd_theme'


# vim: sw=4:et:ai
