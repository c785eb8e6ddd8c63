#!/usr/bin/env python3

# Standard Library
import os
import re
import sys
import json
import datetime
import argparse

# PIP3 modules
import requests
import yaml

# local repo modules
import article_tools.article_normalize
import article_tools.articles_render

ARTICLE_LIMIT_DEFAULT = 5
ARTICLE_LIMIT_MAX = 5000
INPUT_YAML_DEFAULT = os.path.join('data', 'articles.yml')
OUTPUT_DIR_DEFAULT = 'docs'
ISO_DATE_RE = re.compile(r'^\d{4}-\d{2}-\d{2}$')
ASSETS_DIR_DEFAULT = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'css')
ASSETS_SUBDIR = 'css'


#============================================
def checked_article_limit(limit) -> int:
	"""
	Keep an article limit inside 1..4999.

	Args:
		limit: Requested limit (int or numeric text).

	Returns:
		int: The limit, or ARTICLE_LIMIT_DEFAULT when it is out of range or not a number.
	"""
	try:
		limit = int(limit)
	except (TypeError, ValueError):
		return ARTICLE_LIMIT_DEFAULT
	if 0 < limit < ARTICLE_LIMIT_MAX:
		return limit
	return ARTICLE_LIMIT_DEFAULT


#============================================
def article_limit_from_env() -> int:
	"""
	Read ARTICLE_LIMIT from the environment.

	Returns:
		int: Limit in 1..4999, ARTICLE_LIMIT_DEFAULT when unset or invalid.
	"""
	return checked_article_limit(os.environ.get('ARTICLE_LIMIT', ARTICLE_LIMIT_DEFAULT))


#============================================
def allow_empty_from_env() -> bool:
	"""
	Check BUILD_ALLOW_EMPTY.

	Returns:
		bool: True when BUILD_ALLOW_EMPTY=1.
	"""
	return os.environ.get('BUILD_ALLOW_EMPTY', '') == '1'


#============================================
def parse_args():
	"""
	Parse command-line arguments.

	Returns:
		argparse.Namespace: Parsed arguments.
	"""
	parser = argparse.ArgumentParser(
		description='Build static articles.json, build_log.json and index.html from raw article records',
	)

	parser.add_argument(
		'-i', '--input', dest='input_yaml', required=False, type=str,
		default=INPUT_YAML_DEFAULT,
		help=f'Input YAML/JSON file of raw records (default: {INPUT_YAML_DEFAULT})',
	)
	parser.add_argument(
		'-u', '--url', dest='url', required=False, type=str,
		default=os.environ.get('ARTICLES_URL', ''),
		help='Fetch raw records as JSON from this URL instead of --input (env: ARTICLES_URL)',
	)
	parser.add_argument(
		'-o', '--output-dir', dest='output_dir', required=False, type=str,
		default=OUTPUT_DIR_DEFAULT,
		help=f'Output directory (default: {OUTPUT_DIR_DEFAULT})',
	)
	parser.add_argument(
		'-n', '--limit', dest='limit', required=False, type=int,
		default=None,
		help=f'Max articles (default: env ARTICLE_LIMIT or {ARTICLE_LIMIT_DEFAULT})',
	)
	parser.add_argument(
		'-t', '--timeout', dest='timeout', required=False, type=float,
		default=20.0,
		help='Request timeout (seconds) (default: 20.0)',
	)
	parser.add_argument(
		'--allow-empty', dest='allow_empty', required=False,
		action='store_true',
		help='Do not fail when zero articles are found (env: BUILD_ALLOW_EMPTY=1)',
	)
	parser.add_argument(
		'-v', '--verbose', dest='verbose', required=False,
		action='store_true',
		help='Print each normalized article',
	)

	args = parser.parse_args()
	return args


#============================================
def log_info(msg: str):
	"""
	Print an info line to stdout.
	"""
	print(f'[INFO] {msg}')


#============================================
def log_error(msg: str):
	"""
	Print an error line to stderr.
	"""
	print(f'[ERROR] {msg}', file=sys.stderr)


#============================================
def records_from_data(data):
	"""
	Pick the raw records out of loaded YAML/JSON data.

	Accepted shapes:
	- list of records
	- {'articles': [records]}
	- {store_id: record} (store id becomes the fallback article id)

	Args:
		data: Parsed YAML/JSON.

	Returns:
		list|dict: Records for normalize_articles().
	"""
	if data is None:
		return []
	if isinstance(data, list):
		return data
	if isinstance(data, dict):
		if isinstance(data.get('articles', None), list):
			return data['articles']
		if all(isinstance(v, dict) for v in data.values()):
			return data
	raise ValueError('Unexpected data format for article records')


#============================================
def read_raw_records(yaml_path: str):
	"""
	Read raw article records from a YAML or JSON file.

	Args:
		yaml_path (str): Data file path.

	Returns:
		list|dict: Raw records.
	"""
	with open(yaml_path, 'r', encoding='utf-8') as f:
		data = yaml.safe_load(f)
	return records_from_data(data)


#============================================
def fetch_raw_records(url: str, timeout: float):
	"""
	Fetch raw article records from a JSON endpoint.

	Args:
		url (str): Endpoint URL.
		timeout (float): Timeout seconds.

	Returns:
		list|dict: Raw records.
	"""
	resp = requests.get(url, timeout=timeout, headers={'Accept': 'application/json'})
	resp.raise_for_status()
	return records_from_data(resp.json())


#============================================
def sort_articles(articles: list) -> list:
	"""
	Sort articles newest first, then by id descending.

	Articles without an ISO date go last, keeping their order.

	Args:
		articles (list): Canonical articles.

	Returns:
		list: Sorted copy.
	"""
	dated = []
	undated = []
	for article in articles:
		if ISO_DATE_RE.match(str(article.get('date_display', '') or '')):
			dated.append(article)
		else:
			undated.append(article)

	def sort_key(article: dict):
		article_id = article.get('id')
		if isinstance(article_id, int):
			id_key = (1, article_id, '')
		else:
			id_key = (0, 0, str(article_id or ''))
		return article['date_display'], id_key

	dated = sorted(dated, key=sort_key, reverse=True)
	return dated + undated


#============================================
def make_build_log(article_count: int, had_connection: bool, data_source: str) -> dict:
	"""
	Assemble the build log record.

	Args:
		article_count (int): Number of articles written.
		had_connection (bool): True if the data source was read.
		data_source (str): Input path or URL.

	Returns:
		dict: Build log.
	"""
	warnings = []
	if not had_connection:
		warnings.append('No data source connection established')
	if article_count == 0:
		warnings.append('Zero articles returned')

	build_log = {
		'timestamp_utc': datetime.datetime.now(datetime.timezone.utc).isoformat(),
		'article_count': article_count,
		'had_connection': had_connection,
		'data_source': data_source or None,
		'warnings': warnings,
	}
	return build_log


#============================================
def write_output(path: str, content: str) -> bool:
	"""
	Write an output file if changed and report it.

	Args:
		path (str): File path.
		content (str): File content.

	Returns:
		bool: True if written.
	"""
	wrote = article_tools.articles_render.write_text_file_if_changed(path, content)
	if wrote:
		log_info(f'Wrote {path}')
	else:
		log_info(f'{os.path.basename(path)} unchanged; skipping')
	return wrote


#============================================
def copy_assets(assets_dir: str, output_dir: str) -> int:
	"""
	Copy static text assets (stylesheets) into output_dir/css.

	Args:
		assets_dir (str): Source directory; a missing directory copies nothing.
		output_dir (str): Build output directory.

	Returns:
		int: Number of files written or updated.
	"""
	if not os.path.isdir(assets_dir):
		return 0

	written = 0
	for name in sorted(os.listdir(assets_dir)):
		src_path = os.path.join(assets_dir, name)
		if not os.path.isfile(src_path):
			continue
		with open(src_path, 'r', encoding='utf-8') as f:
			content = f.read()
		dest_path = os.path.join(output_dir, ASSETS_SUBDIR, name)
		if write_output(dest_path, content):
			written += 1
	return written


#============================================
def load_articles(input_yaml: str, url: str, timeout: float) -> tuple:
	"""
	Load and normalize articles from a URL or a data file.

	Args:
		input_yaml (str): Data file path.
		url (str): Optional endpoint URL, used instead of input_yaml.
		timeout (float): Request timeout seconds.

	Returns:
		tuple: (articles:list, had_connection:bool, data_source:str)
	"""
	data_source = url or input_yaml
	try:
		if url:
			records = fetch_raw_records(url, timeout)
		else:
			records = read_raw_records(input_yaml)
	except requests.exceptions.RequestException as err:
		log_error(f'Failed to fetch articles: {err}')
		return ([], False, data_source)
	except (OSError, ValueError, yaml.YAMLError) as err:
		log_error(f'Failed to read articles: {err}')
		return ([], False, data_source)

	articles = article_tools.article_normalize.normalize_articles(records)
	return (articles, True, data_source)


#============================================
def build_articles(
	input_yaml: str,
	output_dir: str,
	url: str = '',
	limit: int = ARTICLE_LIMIT_DEFAULT,
	timeout: float = 20.0,
	verbose: bool = False,
	assets_dir: str = ASSETS_DIR_DEFAULT,
) -> dict:
	"""
	Load, normalize and write the static article artifacts.

	Writes articles.json, build_log.json and index.html into output_dir,
	and copies the stylesheet assets next to them.

	Args:
		input_yaml (str): Data file path.
		output_dir (str): Output directory.
		url (str): Optional endpoint URL, used instead of input_yaml.
		limit (int): Max number of articles.
		timeout (float): Request timeout seconds.
		verbose (bool): Print each article.
		assets_dir (str): Directory of static assets copied into output_dir.

	Returns:
		dict: Build log.
	"""
	log_info('Starting static articles build...')
	articles, had_connection, data_source = load_articles(input_yaml, url, timeout)
	articles = sort_articles(articles)[:checked_article_limit(limit)]
	if had_connection:
		log_info(f'Fetched {len(articles)} articles.')

	if verbose:
		for article in articles:
			print(f"  [{article['id']}] {article['title']}")
			print(f"    date: {article['date_display']}")
			print(f"    sources: {len(article['sources'])}")

	os.makedirs(output_dir, exist_ok=True)

	articles_json = json.dumps(articles, indent=4, ensure_ascii=False, default=str)
	write_output(os.path.join(output_dir, 'articles.json'), articles_json)

	build_log = make_build_log(len(articles), had_connection, data_source)
	write_output(os.path.join(output_dir, 'build_log.json'), json.dumps(build_log, indent=4))

	index_html = article_tools.articles_render.render_articles_html_page(articles)
	write_output(os.path.join(output_dir, 'index.html'), index_html)
	copy_assets(assets_dir, output_dir)

	return build_log


#============================================
def main():
	"""
	Main entry point.
	"""
	args = parse_args()
	if args.limit is None:
		limit = article_limit_from_env()
	else:
		limit = checked_article_limit(args.limit)
		if limit != args.limit:
			log_error(f'Ignoring --limit {args.limit}: must be 1..{ARTICLE_LIMIT_MAX - 1}; using {limit}')
	allow_empty = bool(args.allow_empty) or allow_empty_from_env()

	build_log = build_articles(
		input_yaml=args.input_yaml,
		output_dir=args.output_dir,
		url=args.url,
		limit=limit,
		timeout=args.timeout,
		verbose=bool(args.verbose),
	)

	if not build_log['had_connection']:
		log_error('Build failed: No data source connection.')
		sys.exit(1)
	if build_log['article_count'] == 0 and not allow_empty:
		log_error('Build failed: Zero articles (set BUILD_ALLOW_EMPTY=1 to allow).')
		sys.exit(2)
	log_info('Build completed successfully.')


if __name__ == '__main__':
	assert records_from_data({'articles': [{'id': 1}]}) == [{'id': 1}]
	assert records_from_data({'doc-a': {'title': 'x'}}) == {'doc-a': {'title': 'x'}}
	main()
