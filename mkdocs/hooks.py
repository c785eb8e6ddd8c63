#!/usr/bin/env python3

# Standard Library
import os
import sys


#============================================
def on_pre_build(config, **kwargs):
	"""
	MkDocs hook: generate the Articles page from raw records before building.
	"""
	repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
	if repo_root not in sys.path:
		sys.path.insert(0, repo_root)

	import article_tools.article_normalize
	import article_tools.articles_build
	import article_tools.articles_render

	extra = {}
	if hasattr(config, 'extra') and isinstance(config.extra, dict):
		extra = config.extra

	articles_yaml = str(extra.get('articles_yaml', '') or '')
	if not articles_yaml:
		articles_yaml = os.path.join(repo_root, 'data', 'articles.yml')
	elif not os.path.isabs(articles_yaml):
		articles_yaml = os.path.join(repo_root, articles_yaml)

	limit = extra.get('article_limit', None)
	if limit is None:
		limit = article_tools.articles_build.article_limit_from_env()
	else:
		limit = article_tools.articles_build.checked_article_limit(limit)

	articles = []
	if os.path.exists(articles_yaml):
		records = article_tools.articles_build.read_raw_records(articles_yaml)
		articles = article_tools.article_normalize.normalize_articles(records)
		articles = article_tools.articles_build.sort_articles(articles)[:limit]

	content = article_tools.articles_render.render_articles_markdown_page(articles)
	output_path = os.path.join(config.docs_dir, 'articles', 'index.md')
	article_tools.articles_render.write_text_file_if_changed(output_path, content)
