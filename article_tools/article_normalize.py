#!/usr/bin/env python3

# local repo modules
import article_tools.article_body
import article_tools.article_dates
import article_tools.article_sources

# Body text field names, checked in order
BODY_FIELDS = ('text_body', 'textBody', 'content')


#============================================
def pick_body_text(raw: dict) -> str:
	"""
	Pick the article body from the first non-empty body field.

	Args:
		raw (dict): Raw article record.

	Returns:
		str: Body text or ''.
	"""
	for field_name in BODY_FIELDS:
		value = raw.get(field_name)
		if value:
			return value
	return ''


#============================================
def normalize_article(raw: dict, fallback_id=None) -> dict:
	"""
	Build a canonical article from a raw store record.

	Args:
		raw (dict): Raw article record (untrusted).
		fallback_id: Store-provided identifier, used when the record has no id.

	Returns:
		dict: Article with keys id, title, date_display, body_html, sources.
	"""
	if not isinstance(raw, dict):
		raw = {}

	article_id = raw.get('id')
	if article_id is None or article_id == '':
		article_id = fallback_id

	title = raw.get('title')
	title = '' if title is None else str(title)

	article = {
		'id': article_id,
		'title': title,
		'date_display': article_tools.article_dates.normalize_date(raw.get('date')),
		'body_html': article_tools.article_body.format_body(pick_body_text(raw)),
		'sources': article_tools.article_sources.parse_sources(raw.get('sources')),
	}
	return article


#============================================
def normalize_articles(records) -> list:
	"""
	Normalize a batch of raw records.

	Args:
		records: List of records, or dict of {store_id: record}.

	Returns:
		list: Canonical articles in input order.
	"""
	if isinstance(records, dict):
		return [normalize_article(raw, fallback_id=store_id) for store_id, raw in records.items()]
	if not isinstance(records, (list, tuple)):
		return []
	return [normalize_article(raw) for raw in records]


if __name__ == '__main__':
	result = normalize_article({
		'title': 'T',
		'text_body': '**Hi**',
		'sources': 'https://a.com|https://a.com',
		'date': '01-01-2020',
	})
	assert result['body_html'] == '<strong>Hi</strong>'
	assert result['sources'] == [{'href': 'https://a.com', 'label': 'a.com'}]
	assert result['date_display'] == '2020-01-01'
