import datetime

import pytest

from article_tools.article_normalize import normalize_article, normalize_articles, pick_body_text


def test_normalize_article_end_to_end():
	article = normalize_article({
		'title': 'T',
		'text_body': '**Hi**',
		'sources': 'https://a.com|https://a.com',
		'date': '01-01-2020',
	})
	assert article == {
		'id': None,
		'title': 'T',
		'date_display': '2020-01-01',
		'body_html': '<strong>Hi</strong>',
		'sources': [{'href': 'https://a.com', 'label': 'a.com'}],
	}


def test_record_id_wins_over_store_id():
	assert normalize_article({'id': 7}, fallback_id='doc-7')['id'] == 7


@pytest.mark.parametrize('raw', [{}, {'id': None}, {'id': ''}])
def test_store_id_used_when_record_has_no_id(raw):
	assert normalize_article(raw, fallback_id='doc-1')['id'] == 'doc-1'


@pytest.mark.parametrize(
	'raw, expected',
	[
		({'text_body': 'a', 'textBody': 'b', 'content': 'c'}, 'a'),
		({'textBody': 'b', 'content': 'c'}, 'b'),
		({'text_body': '', 'content': 'c'}, 'c'),
		({}, ''),
	],
)
def test_pick_body_text_fallbacks(raw, expected):
	assert pick_body_text(raw) == expected


def test_alternate_body_field_is_formatted():
	article = normalize_article({'textBody': 'x < y\nz'})
	assert article['body_html'] == 'x &lt; y<br>z'


@pytest.mark.parametrize('raw', [{}, None, 'not a record', ['x']])
def test_empty_or_malformed_record_gets_safe_defaults(raw):
	assert normalize_article(raw) == {
		'id': None,
		'title': '',
		'date_display': '',
		'body_html': '',
		'sources': [],
	}


def test_title_is_passed_through_as_text():
	assert normalize_article({'title': 2024})['title'] == '2024'
	assert normalize_article({'title': '<b>raw</b>'})['title'] == '<b>raw</b>'


def test_date_object_and_unparsed_date():
	stamp = datetime.datetime(2025, 9, 18, 12, 0, tzinfo=datetime.timezone.utc)
	assert normalize_article({'date': stamp})['date_display'] == '2025-09-18'
	assert normalize_article({'date': 'Sept 18'})['date_display'] == 'Sept 18'


def test_malformed_fields_do_not_raise():
	article = normalize_article({
		'id': 3,
		'title': None,
		'text_body': 12345,
		'sources': '[not json',
		'date': object,
	})
	assert article['title'] == ''
	assert article['body_html'] == '12345'
	assert article['sources'] == []
	assert article['date_display']


def test_normalize_articles_list():
	articles = normalize_articles([{'id': 1, 'title': 'a'}, {'id': 2, 'title': 'b'}])
	assert [a['id'] for a in articles] == [1, 2]


def test_normalize_articles_mapping_uses_store_ids():
	articles = normalize_articles({
		'doc-a': {'title': 'a'},
		'doc-b': {'id': 9, 'title': 'b'},
	})
	assert [a['id'] for a in articles] == ['doc-a', 9]


@pytest.mark.parametrize('records', [None, 'x', 5])
def test_normalize_articles_rejects_other_shapes_quietly(records):
	assert normalize_articles(records) == []
