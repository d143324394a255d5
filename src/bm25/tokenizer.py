"""
Tokenizer for BM25 text processing.

Tokenization pipeline:
1. Split on anything that is not a letter or digit
2. Drop 1-character tokens
3. Drop tokens that start with a digit ("2nd", "1990")
4. Lowercase

Stopwords are NOT removed here: stopword filtering is a Corpus-level concern,
so documents still report every term they contain.
"""

from typing import Any, List

from nltk.tokenize import RegexpTokenizer

# Letters (ASCII + Latin-1 accented) and digits
_tokenizer = RegexpTokenizer(r"[a-zA-Z0-9À-ÖØ-öø-ÿ]+")

MIN_TOKEN_LENGTH = 2


def tokenize(text: Any) -> List[str]:
    """
    Tokenize text into normalized terms.

    Args:
        text: Input text to tokenize (anything that is not a string yields no tokens)

    Returns:
        List of lowercase tokens, in document order, duplicates kept

    Examples:
        >>> tokenize("This is test document number 1.")
        ['this', 'is', 'test', 'document', 'number']

        >>> tokenize("Café au lait, 2nd cup")
        ['café', 'au', 'lait', 'cup']

        >>> tokenize("   ")
        []
    """
    if not isinstance(text, str) or not text:
        return []

    return [
        word.lower()
        for word in _tokenizer.tokenize(text)
        if len(word) >= MIN_TOKEN_LENGTH and not word[0].isdigit()
    ]
