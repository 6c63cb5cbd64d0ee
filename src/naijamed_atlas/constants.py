"""Project-wide constants."""

# -- Base client defaults ---------------------------------------------------
DEFAULT_TIMEOUT: float = 30.0

# -- PubMed / NCBI ----------------------------------------------------------
NCBI_BASE_URL: str = "https://eutils.ncbi.nlm.nih.gov/entrez/eutils"
PUBMED_SEARCH_URL: str = f"{NCBI_BASE_URL}/esearch.fcgi"
PUBMED_FETCH_URL: str = f"{NCBI_BASE_URL}/efetch.fcgi"
PUBMED_SEARCH_RETMAX: int = 30
PUBMED_SEARCH_SORT: str = "relevance"

# -- Tiered query planner ---------------------------------------------------
# "nigeria"/"nigerian" are stripped because the location clause adds them back.
STOP_WORDS: frozenset[str] = frozenset(
    {
        "what", "is", "the", "are", "how", "does", "do", "can", "could", "should",
        "would", "tell", "me", "about", "find", "search", "looking", "for", "in",
        "of", "to", "a", "an", "local", "name", "names", "called", "known", "as",
        "medicine", "traditional", "herbal", "remedy", "cure", "treatment",
        "use", "uses", "used", "nigeria", "nigerian",
    }
)
MIN_KEYWORD_LENGTH: int = 3

LOCATION_CONTEXT: str = "(Nigeria OR Nigerian)"
REGIONAL_CONTEXT: str = '("West Africa" OR Africa OR Ghana OR Benin OR Cameroon)'
MEDICINE_CONTEXT: str = (
    "(Traditional Medicine OR Herbal Medicine OR Ethnobotany OR Phytomedicine OR "
    '"Medicinal Plants" OR Ethnomedicine OR "Indigenous Knowledge" OR "Folk Medicine" OR '
    '"Plant Extract" OR Bioactive OR Pharmacology OR Toxicity OR Phytochemical OR '
    '"Natural Product" OR "Proximate Analysis" OR "Nutritional Value" OR "Therapeutic")'
)

PROGRESS_TIER_1: str = "Searching Nigerian medical archives..."
PROGRESS_TIER_2: str = "Broadening search to Nigerian botanical records..."
PROGRESS_TIER_3: str = "Checking West African regional research..."

# -- XML result parser ------------------------------------------------------
NO_TITLE: str = "No Title Available"
NO_ABSTRACT: str = "No abstract available."
UNKNOWN_JOURNAL: str = "Unknown Journal"
MAX_AUTHORS: int = 5

# -- Plant-name extractor ---------------------------------------------------
BINOMIAL_BLACKLIST: frozenset[str] = frozenset(
    {
        "United States",
        "New York",
        "South Africa",
        "North America",
        "West Africa",
        "East Asia",
        "European Union",
        "In vitro",
        "In vivo",
        "Et al",
        "Per cent",
        "Ad libitum",
    }
)
MIN_EPITHET_LENGTH: int = 4

# -- Herbal reference -------------------------------------------------------
EMBEDDING_DIM: int = 384
HERBAL_TOP_K: int = 5

# -- Name enrichment --------------------------------------------------------
MAX_ENRICHED_NAMES: int = 10
NAME_LOOKUP_BATCH_SIZE: int = 2
NAME_LOOKUP_BATCH_DELAY: float = 0.8  # seconds
NAME_LOOKUP_TEMPERATURE: float = 0.1
NAME_LOOKUP_MAX_TOKENS: int = 400

# -- Synthesis --------------------------------------------------------------
SYNTHESIS_TEMPERATURE: float = 0.4
SYNTHESIS_MAX_TOKENS: int = 2500

SYNTHESIS_EMPTY_RESPONSE: str = "I could not generate a response from the available data."
SYNTHESIS_ERROR_RESPONSE: str = (
    "**System Error:** Unable to synthesize research at this time. "
    "Please try again later."
)

# -- Research session -------------------------------------------------------
SESSION_ERROR_RESPONSE: str = (
    "An error occurred while processing your request. Please try again later."
)
