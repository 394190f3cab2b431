# Basic list of English stopwords (extended through config "extra_stopwords")
STOPWORDS = frozenset([
    "a", "an", "and", "are", "as", "at", "be", "but", "by", "for", "if", "in",
    "into", "is", "it", "no", "not", "of", "on", "or", "such", "that", "the",
    "their", "then", "there", "these", "they", "this", "to", "was", "will", "with",
    "i", "me", "my", "myself", "we", "our", "ours", "ourselves", "you", "your",
    "yours", "yourself", "yourselves", "he", "him", "his", "himself", "she",
    "her", "hers", "herself", "its", "itself", "them", "theirs", "themselves",
    "what", "which", "who", "whom", "those", "am", "were", "been", "being",
    "have", "has", "had", "having", "do", "does", "did", "doing", "because",
    "until", "while", "about", "against", "between", "through", "during",
    "before", "after", "above", "below", "from", "up", "down", "out", "off",
    "over", "under", "again", "further", "once", "here", "when", "where", "why",
    "how", "all", "any", "both", "each", "few", "more", "most", "other", "some",
    "nor", "only", "own", "same", "so", "than", "too", "very", "s", "t", "can",
    "just", "don", "should", "now", "also", "would", "could", "may", "might",
    "must", "shall", "let", "get", "got", "one", "us",
])
