#!/usr/bin/env python3

# Standard Library
import re
import datetime

# PIP3 modules
import dateutil.parser

DAY_FIRST_DATE_RE = re.compile(r'^(\d{2})-(\d{2})-(\d{4})$')

# Conversion methods exposed by timestamp wrappers (protobuf, pandas, ...)
TIMESTAMP_CONVERTERS = ('to_datetime', 'ToDatetime', 'to_pydatetime')
# Missing parts of a partial date ('September 2025') fall back to day 1 / January
PARTIAL_DATE_DEFAULT = datetime.datetime(2000, 1, 1)


#============================================
def timestamp_converter(date_val):
	"""
	Find the datetime conversion method of a timestamp wrapper.

	Args:
		date_val: Raw date value.

	Returns:
		callable|None: Bound conversion method or None.
	"""
	for name in TIMESTAMP_CONVERTERS:
		method = getattr(date_val, name, None)
		if callable(method):
			return method
	return None


#============================================
def utc_date_text(value) -> str:
	"""
	Format a datetime or date as a UTC YYYY-MM-DD string.

	Naive datetimes are taken as UTC.

	Args:
		value (datetime.datetime|datetime.date): Date value.

	Returns:
		str: YYYY-MM-DD.
	"""
	if isinstance(value, datetime.datetime):
		if value.tzinfo is not None:
			value = value.astimezone(datetime.timezone.utc)
		return value.strftime('%Y-%m-%d')
	return value.isoformat()


#============================================
def normalize_date(date_val) -> str:
	"""
	Canonicalize a raw article date.

	Recognized variants:
	- absent/empty: ''
	- datetime, date, or timestamp wrapper: UTC YYYY-MM-DD
	- 'DD-MM-YYYY' string: YYYY-MM-DD (always day first)
	- anything else: the raw value as a string

	Args:
		date_val: Raw date value from the record.

	Returns:
		str: Date for display, never raises.
	"""
	if date_val is None or date_val == '':
		return ''

	if isinstance(date_val, (datetime.datetime, datetime.date)):
		return utc_date_text(date_val)

	if isinstance(date_val, str):
		match = DAY_FIRST_DATE_RE.match(date_val)
		if match:
			day, month, year = match.groups()
			return f'{year}-{month}-{day}'
		return date_val

	converter = timestamp_converter(date_val)
	if converter is not None:
		try:
			converted = converter()
		except (ValueError, TypeError, OverflowError, OSError):
			return str(date_val)
		if isinstance(converted, (datetime.datetime, datetime.date)):
			return utc_date_text(converted)

	return str(date_val)


#============================================
def format_display_date(date_display: str) -> str:
	"""
	Format a normalized date for presentation, e.g. '18 Sep 2025'.

	Args:
		date_display (str): Output of normalize_date().

	Returns:
		str: Short date, or the raw string when it cannot be parsed.
	"""
	date_display = str(date_display or '')
	if not date_display.strip():
		return ''

	try:
		dt = dateutil.parser.parse(date_display, default=PARTIAL_DATE_DEFAULT)
	except (ValueError, OverflowError):
		return date_display

	return dt.strftime('%d %b %Y')


if __name__ == '__main__':
	assert normalize_date('15-03-2024') == '2024-03-15'
	assert normalize_date('') == ''
	assert normalize_date('not a date') == 'not a date'
	assert normalize_date(datetime.date(2025, 9, 18)) == '2025-09-18'
	assert format_display_date('2025-09-18') == '18 Sep 2025'
	assert format_display_date('not a date') == 'not a date'
