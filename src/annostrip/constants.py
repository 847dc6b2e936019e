LINE_SEP = '\n'

LATEX_COMMENT = '%'
LATEX_ESCAPE = '\\'
LATEX_APPENDIX = '\\appendix'
LATEX_END_DOCUMENT = '\\end{document}'
LATEX_APPENDIX_PLACEHOLDER = '\\appendix\n...\n'

PY_COMMENT = '#'
PY_DOCSTRING_DELIMS = ('"""', "'''")
PY_HEADER_PREFIXES = ('def ', 'class ')

MD_COMMENT_OPEN = '<!--'
MD_COMMENT_CLOSE = '-->'
