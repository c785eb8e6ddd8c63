#!/usr/bin/env python3

# Standard Library
import re
import json
import urllib.parse

# 'Label text (https://url)' at the end of a token
LABELED_URL_RE = re.compile(r'^(.*)\((https?://[^)]+)\)\s*$')
# trailing dash, en dash or em dash left between label and url
LABEL_TAIL_RE = re.compile(r'[\-–—]\s*$')
WHITESPACE_RE = re.compile(r'\s')
HOSTNAME_RE = re.compile(r'^[\w\-.%~]+$')
IPV6_HOST_RE = re.compile(r'^[0-9a-f:.]+$')

# Delimiter classes, checked in priority order; only the first match is used
DELIMITERS = (
	('newline', re.compile(r'[\r\n]+')),
	('comma', re.compile(r',')),
	('pipe', re.compile(r'\|')),
)


#============================================
def domain_from_hostname(hostname: str) -> str:
	"""
	Approximate the registrable domain of a hostname.

	Keeps only the last two labels, so multi-part suffixes such
	as co.uk are not handled.

	Args:
		hostname (str): Hostname.

	Returns:
		str: Domain label, e.g. 'example.com'.
	"""
	host = re.sub(r'^www\.', '', str(hostname or ''))
	parts = host.split('.')
	if len(parts) <= 2:
		return host
	return '.'.join(parts[-2:])


#============================================
def validate_url(href: str) -> str:
	"""
	Strict absolute URL check.

	Args:
		href (str): URL candidate.

	Returns:
		str: Lowercased hostname, or '' when the URL is not valid.
	"""
	if not href or WHITESPACE_RE.search(href):
		return ''
	try:
		parts = urllib.parse.urlsplit(href)
		# port access raises on malformed ports
		_port = parts.port
	except ValueError:
		return ''
	if not parts.scheme or not parts.netloc:
		return ''
	hostname = parts.hostname or ''
	if ':' in hostname:
		return hostname if IPV6_HOST_RE.match(hostname) else ''
	if not HOSTNAME_RE.match(hostname):
		return ''
	return hostname


#============================================
def classify_sources_input(sources_input) -> tuple:
	"""
	Discriminate the shape of a raw sources value.

	Args:
		sources_input: Raw 'sources' field.

	Returns:
		tuple: (kind:str, candidate_tokens:list). kind is one of
		'list', 'json', 'newline', 'comma', 'pipe', 'single', 'empty'.
	"""
	if isinstance(sources_input, (list, tuple)):
		tokens = []
		for item in sources_input:
			if item is None or item == '':
				continue
			tokens.append(str(item))
		return ('list', tokens)

	if not isinstance(sources_input, str):
		return ('empty', [])

	text = sources_input.strip()
	if not text:
		return ('empty', [])

	if text.startswith('[') and text.endswith(']'):
		try:
			parsed = json.loads(text)
		except ValueError:
			return ('single', [text])
		if not isinstance(parsed, list):
			return ('single', [text])
		tokens = [str(item) for item in parsed if item is not None and item != '']
		return ('json', tokens)

	for kind, delimiter_re in DELIMITERS:
		if delimiter_re.search(text):
			pieces = [p.strip() for p in delimiter_re.split(text)]
			return (kind, [p for p in pieces if p])

	return ('single', [text])


#============================================
def split_label(token: str) -> tuple:
	"""
	Split a 'Label (https://url)' token.

	Args:
		token (str): Candidate token.

	Returns:
		tuple: (href:str, label:str). label is '' when not given.
	"""
	token = token.strip()
	match = LABELED_URL_RE.match(token)
	if not match:
		return (token, '')
	label = match.group(1).strip()
	label = LABEL_TAIL_RE.sub('', label).strip()
	return (match.group(2).strip(), label)


#============================================
def parse_sources(sources_input) -> list:
	"""
	Parse a raw sources field into validated links.

	Invalid URLs are dropped. Links are unique by exact href,
	first occurrence wins and input order is kept.

	Args:
		sources_input: list, JSON array string, delimited string or single string.

	Returns:
		list: List of {'href': str, 'label': str} dicts, possibly empty.
	"""
	_kind, tokens = classify_sources_input(sources_input)

	links = []
	seen = set()
	for token in tokens:
		href, label = split_label(token)
		hostname = validate_url(href)
		if not hostname:
			continue
		if href in seen:
			continue
		seen.add(href)
		links.append({
			'href': href,
			'label': label or domain_from_hostname(hostname),
		})
	return links


if __name__ == '__main__':
	assert domain_from_hostname('www.example.com') == 'example.com'
	assert domain_from_hostname('news.bbc.co.uk') == 'co.uk'
	assert len(parse_sources(['https://a.com', 'https://a.com'])) == 1
	assert parse_sources('Example Site (https://example.com)') == [
		{'href': 'https://example.com', 'label': 'Example Site'}
	]
