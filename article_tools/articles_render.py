#!/usr/bin/env python3

# Standard Library
import html
import os
import urllib.parse

# local repo modules
import article_tools.article_dates
import article_tools.article_present

PAGE_TITLE_DEFAULT = 'AI Articles'
LINKABLE_SCHEMES = ('http', 'https')


#============================================
def is_linkable_href(href: str) -> bool:
	"""
	Check that an href is safe to put in an anchor.

	Args:
		href (str): Validated source URL.

	Returns:
		bool: True for http and https URLs only.
	"""
	try:
		scheme = urllib.parse.urlsplit(str(href or '')).scheme
	except ValueError:
		return False
	return scheme.lower() in LINKABLE_SCHEMES


#============================================
def render_sources_html(sources) -> str:
	"""
	Render the sources block.

	Only http(s) sources become links. Other schemes are shown
	as escaped text.

	Args:
		sources (list|str): Link dicts or the no-sources marker.

	Returns:
		str: HTML.
	"""
	if sources == article_tools.article_present.NO_SOURCES or not sources:
		return '\t<div class="article_sources"><span>No sources</span></div>\n'

	links = []
	for i, link in enumerate(sources):
		href = str(link.get('href', ''))
		if not is_linkable_href(href):
			links.append(f'<span class="article_source_text">{html.escape(href)}</span>')
			continue
		href_html = html.escape(href, quote=True)
		label = str(link.get('label', '') or '').strip() or f'Source {i + 1}'
		label_html = html.escape(label)
		links.append(
			f'<a class="article_source_link" href="{href_html}" target="_blank" rel="noopener noreferrer">{label_html}</a>'
		)

	out = '\t<div class="article_sources mb-2p">'
	out += ' '.join(links)
	out += '</div>\n'
	return out


#============================================
def render_article_html(blocks: list) -> str:
	"""
	Render one article's display blocks as HTML.

	Title and date are escaped here. The body block is already safe
	HTML and is inserted as-is.

	Args:
		blocks (list): Output of article_present.present().

	Returns:
		str: HTML for one article.
	"""
	fields = {}
	for block in blocks:
		fields.update(block)

	index = fields.get('index')
	title_html = html.escape(str(fields.get('title', '') or ''))
	date_text = article_tools.article_dates.format_display_date(fields.get('date', ''))

	out = '<div class="article_root mb-2p">\n'
	if index is not None and index != '':
		out += f'\t<p class="article_index">{html.escape(str(index))}</p>\n'

	out += '\t<div class="article_header mb-2p">'
	out += f'<h2 class="article_title">{title_html}</h2>'
	if date_text:
		out += f'<p class="article_date">{html.escape(date_text)}</p>'
	out += '</div>\n'

	out += f'\t<div class="article_body mb-2p">{fields.get("body", "")}</div>\n'
	out += render_sources_html(fields.get('sources'))
	out += '</div>\n'
	return out


#============================================
def render_articles_list_html(articles: list) -> str:
	"""
	Render all articles inside the #articles container.

	Args:
		articles (list): Canonical articles.

	Returns:
		str: HTML.
	"""
	out = '<div id="articles">\n'
	for article in articles:
		blocks = article_tools.article_present.present(article)
		out += render_article_html(blocks)
	out += '</div>\n'
	return out


#============================================
def render_articles_html_page(articles: list, page_title: str = PAGE_TITLE_DEFAULT) -> str:
	"""
	Render a standalone static HTML page.

	Args:
		articles (list): Canonical articles.
		page_title (str): Page and header title.

	Returns:
		str: HTML document.
	"""
	title_html = html.escape(page_title)

	out = ''
	out += '<!DOCTYPE html>\n'
	out += '<html lang="en">\n'
	out += '<head>\n'
	out += '\t<meta charset="UTF-8">\n'
	out += '\t<meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
	out += f'\t<title>{title_html}</title>\n'
	out += '\t<link rel="stylesheet" href="css/main.css">\n'
	out += '</head>\n'
	out += '<body>\n'
	out += f'<div id="header">\n\t<h1>{title_html}</h1>\n</div>\n'
	out += render_articles_list_html(articles)
	out += '</body>\n'
	out += '</html>\n'
	return out


#============================================
def render_articles_markdown_page(articles: list) -> str:
	"""
	Render the MkDocs Articles page.

	Args:
		articles (list): Canonical articles.

	Returns:
		str: Markdown content with embedded HTML.
	"""
	out = ''
	out += '---\n'
	out += f'title: "{PAGE_TITLE_DEFAULT}"\n'
	out += 'type: "page"\n'
	out += '---\n'
	out += '\n'
	out += '<!-- Generated from data/articles.yml. Edit that file instead. -->\n'
	out += '\n'
	out += f'# {PAGE_TITLE_DEFAULT}\n'
	out += '\n'

	if not articles:
		out += '_No articles listed yet._\n'
		return out

	out += render_articles_list_html(articles)
	out += '\n'
	return out


#============================================
def write_text_file_if_changed(path: str, content: str) -> bool:
	"""
	Write a text file only if content changed.

	Args:
		path (str): File path.
		content (str): New file content.

	Returns:
		bool: True if file was written/updated.
	"""
	parent_dir = os.path.dirname(path)
	if parent_dir:
		os.makedirs(parent_dir, exist_ok=True)

	if os.path.exists(path):
		with open(path, 'r', encoding='utf-8') as f:
			existing = f.read()
		if existing == content:
			return False

	with open(path, 'w', encoding='utf-8') as f:
		f.write(content)
	return True


if __name__ == '__main__':
	page = render_articles_html_page([{
		'id': 1, 'title': '<b>T</b>', 'date_display': '2025-09-18',
		'body_html': 'x', 'sources': [],
	}])
	assert '&lt;b&gt;T&lt;/b&gt;' in page
	assert '18 Sep 2025' in page
	assert 'No sources' in page
