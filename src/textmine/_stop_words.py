"""English function words and newswire boilerplate dropped before scoring."""

STOP_WORDS: frozenset[str] = frozenset({
    # Articles, conjunctions
    "the", "an", "and", "or", "but", "nor", "yet", "so", "if", "than", "then",
    # Prepositions
    "about", "above", "across", "after", "against", "along", "among",
    "around", "at", "before", "behind", "below", "beside", "between",
    "beyond", "by", "during", "except", "for", "from", "in", "inside",
    "into", "near", "of", "off", "on", "onto", "out", "over", "since",
    "through", "throughout", "to", "toward", "towards", "under", "until",
    "upon", "with", "within", "without",
    # Pronouns and determiners
    "he", "she", "it", "we", "they", "him", "her", "us", "them", "his",
    "its", "our", "their", "this", "that", "these", "those", "which",
    "who", "whom", "whose", "what", "each", "every", "either", "neither",
    "some", "such", "other", "another", "any", "all", "both", "more", "most",
    # Auxiliaries and modals
    "is", "are", "was", "were", "be", "been", "being", "has", "have", "had",
    "does", "did", "will", "would", "shall", "should", "could", "might",
    "must", "can",
    # Adverbs
    "also", "not", "only", "very", "just", "still", "even", "however",
    "there", "here", "when", "where", "while", "whether", "because",
    # Newswire boilerplate
    "said", "says", "reuter", "reuters", "today", "yesterday", "week",
    "year", "years", "told", "added",
})
