from article_tools.article_present import NO_SOURCES, present


def make_article(**overrides):
	article = {
		'id': 4,
		'title': 'Title',
		'date_display': '2025-09-18',
		'body_html': 'Body<br>text',
		'sources': [{'href': 'https://a.com', 'label': 'a.com'}],
	}
	article.update(overrides)
	return article


def test_full_block_order():
	blocks = present(make_article())
	assert blocks == [
		{'index': 4},
		{'title': 'Title'},
		{'date': '2025-09-18'},
		{'body': 'Body<br>text'},
		{'sources': [{'href': 'https://a.com', 'label': 'a.com'}]},
	]


def test_date_block_omitted_when_empty():
	blocks = present(make_article(date_display=''))
	assert [next(iter(b)) for b in blocks] == ['index', 'title', 'body', 'sources']


def test_unparsed_date_passed_through_untouched():
	blocks = present(make_article(date_display='sometime soon'))
	assert {'date': 'sometime soon'} in blocks


def test_empty_sources_become_marker():
	blocks = present(make_article(sources=[]))
	assert blocks[-1] == {'sources': NO_SOURCES}


def test_present_does_not_share_source_list():
	article = make_article()
	blocks = present(article)
	blocks[-1]['sources'].append({'href': 'https://b.com', 'label': 'b.com'})
	assert len(article['sources']) == 1
