#!/usr/bin/env python3

# Standard Library
import re
import html

APOSTROPHE_MARKER = '%%'
BOLD_RE = re.compile(r'\*\*(.+?)\*\*')
LINE_BREAK_RE = re.compile(r'\r\n|\r|\n')


#============================================
def format_body(raw) -> str:
	"""
	Turn free article text into a safe HTML fragment.

	Steps, in this order:
	1. '%%' becomes an apostrophe
	2. &, <, > are escaped (quotes are left alone)
	3. **text** becomes <strong>text</strong>
	4. line breaks become <br>

	Escaping must run before the bold substitution: the only tags in
	the output are the <strong> and <br> tags added here.

	Args:
		raw (str): Raw body text, may be None.

	Returns:
		str: HTML fragment.
	"""
	text = '' if raw is None else str(raw)
	text = text.replace(APOSTROPHE_MARKER, "'")
	text = html.escape(text, quote=False)
	text = BOLD_RE.sub(r'<strong>\1</strong>', text)
	text = LINE_BREAK_RE.sub('<br>', text)
	return text


if __name__ == '__main__':
	assert format_body('a **b** c\nd') == 'a <strong>b</strong> c<br>d'
	assert format_body('it%%s fine') == "it's fine"
	assert format_body('<script>alert(1)</script>') == '&lt;script&gt;alert(1)&lt;/script&gt;'
