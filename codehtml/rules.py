"""
# Code-HTML: rules.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Keyword rules and their file syntax.

A keyword rules file is parsed line by line as
````
# «comment»
* «keyword» --> «colour»
````
where whitespace-only lines are ignored.
"""

import re
from typing import NamedTuple, Optional

from codehtml.exceptions import KeywordRuleSyntaxException


class KeywordRule(NamedTuple):
    keyword: str
    colour: str


def is_whitespace_only(line: str) -> bool:
    return bool(re.fullmatch(pattern=r'[\s]*', string=line, flags=re.ASCII))


def is_comment(line: str) -> bool:
    return line.startswith('#')


def compute_keyword_rule_match(line: str) -> Optional[re.Match]:
    return re.fullmatch(
        pattern=r'''
            [*] [^\S\n]+
            (?P<keyword> [\S]+ )
            [^\S\n]+ [-]{2,} [>] [^\S\n]+
            (?P<colour> [\w#()%,.-]+ )
            [\s]*
        ''',
        string=line,
        flags=re.ASCII | re.VERBOSE,
    )


def parse_keyword_rules(rules: str) -> list['KeywordRule']:
    """
    Parse keyword rules file content into a list of keyword rules.

    Rules are returned in file order, which is the order they will be applied in.
    """
    keyword_rules = []

    for line_number, line in enumerate(rules.splitlines(), start=1):
        if is_whitespace_only(line) or is_comment(line):
            continue

        keyword_rule_match = compute_keyword_rule_match(line)
        if keyword_rule_match is None:
            raise KeywordRuleSyntaxException(line_number, line)

        keyword_rules.append(KeywordRule(keyword_rule_match.group('keyword'), keyword_rule_match.group('colour')))

    return keyword_rules
