#!/usr/bin/env python3

NO_SOURCES = 'no-sources'


#============================================
def present(article: dict) -> list:
	"""
	Map a canonical article to ordered display blocks.

	Block order: index, title, date (only when set), body, sources.
	Each block is a single-key dict. An empty source list becomes
	the NO_SOURCES marker.

	Args:
		article (dict): Output of normalize_article().

	Returns:
		list: Display blocks.
	"""
	blocks = []
	blocks.append({'index': article.get('id')})
	blocks.append({'title': article.get('title', '')})

	date_display = article.get('date_display', '')
	if date_display:
		blocks.append({'date': date_display})

	blocks.append({'body': article.get('body_html', '')})

	sources = article.get('sources') or []
	if sources:
		blocks.append({'sources': list(sources)})
	else:
		blocks.append({'sources': NO_SOURCES})
	return blocks


if __name__ == '__main__':
	blocks = present({'id': 1, 'title': 'T', 'date_display': '', 'body_html': '', 'sources': []})
	assert [list(b.keys())[0] for b in blocks] == ['index', 'title', 'body', 'sources']
	assert blocks[-1]['sources'] == NO_SOURCES
