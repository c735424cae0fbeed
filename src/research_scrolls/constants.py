"""Project-wide constants."""

# -- Search defaults --------------------------------------------------------
DEFAULT_LIMIT: int = 250
FALLBACK_QUERY: str = "recent"
ALL_SUBJECTS: str = "All"

SUBJECTS: tuple[str, ...] = (
    ALL_SUBJECTS,
    "AI",
    "Quantum Computing",
    "Climate Science",
    "Biotechnology",
    "Robotics",
    "Physics",
    "Chemistry",
    "Biology",
    "Computer Science",
    "Mathematics",
)

# -- Base client defaults ---------------------------------------------------
DEFAULT_TIMEOUT: float = 10.0
DEFAULT_MAX_RETRIES: int = 1
DEFAULT_USER_AGENT: str = "research-scrolls/0.1 (+https://github.com/research-scrolls)"

# -- Response cache ---------------------------------------------------------
CACHE_TTL: int = 5 * 60  # 5 minutes in seconds
CACHE_MAX_ENTRIES: int = 50

# -- Sentinels --------------------------------------------------------------
UNTITLED: str = "Untitled"
NO_ABSTRACT: str = "No abstract available"
ABSTRACT_NOT_AVAILABLE: str = "Abstract not available"

# -- Synthetic data ---------------------------------------------------------
LOCAL_CORPUS_SIZE: int = 500
MAX_SYNTHETIC_PER_SOURCE: int = 100

# Offsets keep ids from different sources apart when merged. They are a
# display hint, not a primary key.
SOURCE_ID_OFFSETS: dict[str, int] = {
    "arxiv": 1000,
    "pubmed": 2000,
    "ieee": 3000,
    "springer": 4000,
    "sciencedirect": 5000,
    "semanticscholar": 6000,
    "biorxiv": 7000,
    "nature": 8000,
    "science": 9000,
}

# -- arXiv ------------------------------------------------------------------
ARXIV_QUERY_URL: str = "https://export.arxiv.org/api/query"
ARXIV_ABS_URL: str = "https://arxiv.org/abs"

# -- PubMed / NCBI ----------------------------------------------------------
NCBI_BASE_URL: str = "https://eutils.ncbi.nlm.nih.gov/entrez/eutils"
PUBMED_SEARCH_URL: str = f"{NCBI_BASE_URL}/esearch.fcgi"
PUBMED_FETCH_URL: str = f"{NCBI_BASE_URL}/efetch.fcgi"
PUBMED_SUMMARY_URL: str = f"{NCBI_BASE_URL}/esummary.fcgi"
PUBMED_ARTICLE_URL: str = "https://pubmed.ncbi.nlm.nih.gov"
PUBMED_DEFAULT_JOURNAL: str = "PubMed Journal"

# -- Semantic Scholar -------------------------------------------------------
SEMANTIC_SCHOLAR_SEARCH_URL: str = (
    "https://api.semanticscholar.org/graph/v1/paper/search"
)
SEMANTIC_SCHOLAR_PAPER_URL: str = "https://www.semanticscholar.org/paper"
SEMANTIC_SCHOLAR_FIELDS: str = (
    "title,abstract,authors,venue,year,publicationDate,url,openAccessPdf,paperId"
)
SEMANTIC_SCHOLAR_DEFAULT_VENUE: str = "Semantic Scholar"

# -- bioRxiv ----------------------------------------------------------------
BIORXIV_DETAILS_URL: str = "https://api.biorxiv.org/details/biorxiv"
BIORXIV_DEFAULT_INTERVAL: str = "30d"
DOI_URL: str = "https://doi.org"
