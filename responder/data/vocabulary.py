"""Word lists shared by the response engines."""
from __future__ import annotations

KEYWORD_STOP_WORDS = frozenset(
    {
        # articles, prepositions, conjunctions
        "the", "and", "for", "that", "with", "but", "yet", "nor", "because",
        "from", "this", "these", "those", "there", "then", "than", "into",
        "onto", "upon", "over", "under", "above", "below", "near",
        # question words
        "what", "why", "how", "when", "where", "which", "who", "whose", "whom",
        "tell", "about", "explain", "describe", "show", "discuss", "define",
        # auxiliary, modal and common verbs
        "are", "will", "does", "did", "can", "could", "would", "should", "may",
        "might", "have", "has", "had", "was", "were", "been", "being", "you",
        "not", "think", "know", "get", "see", "look", "make", "want", "come",
        "take", "use", "find", "give", "some",
        # pronouns, possessives and vague quantifiers
        "your", "yours", "our", "ours", "their", "theirs", "his", "her", "hers",
        "its", "mine", "they", "them", "she", "him", "one", "any", "all",
        "each", "both", "few", "many", "more", "most", "other", "such", "just",
        "very",
    }
)

RELEVANCE_STOP_WORDS = KEYWORD_STOP_WORDS | frozenset(
    {
        "also", "anything", "anyone", "doing", "done", "else",
        "even", "ever", "every", "going", "good", "great", "hello", "here",
        "like", "made", "much", "need", "only", "please", "really",
        "said", "same", "something", "still", "sure", "thank", "thanks",
        "they're", "thing", "things", "well", "what's", "whats",
        "while", "without", "you're", "yourself",
    }
)

# A keyword found here earns the importance bonus during extraction.
DOMAIN_TERMS = frozenset(
    {
        "mac", "macintosh", "system", "file", "disk", "memory", "error",
        "help", "app", "window", "program", "software", "problem", "computer",
        "network",
    }
)

# Checked in order when seeding a Markov reply from the user's message.
TOPIC_KEYWORDS = (
    "macintosh",
    "finder",
    "memory",
    "system",
    "disk",
    "printer",
    "network",
    "software",
    "font",
    "keyboard",
    "mouse",
    "window",
    "computer",
    "mac",
)
