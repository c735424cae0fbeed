"""Seed material for synthetic paper records."""

# Base records every synthetic paper is derived from. `title` and `abstract`
# are kept; everything else is regenerated per record.
BASE_PAPERS: tuple[dict[str, str], ...] = (
    {
        "title": "Deep Learning Approaches in Mobile Edge Computing",
        "abstract": (
            "Mobile edge computing (MEC) has emerged as a promising paradigm that brings "
            "cloud computing capabilities closer to mobile users. This paper surveys the "
            "integration of deep learning in MEC, analyzing various architectures and "
            "their implications for latency-sensitive applications. We present a "
            "comprehensive review of current approaches and highlight future research "
            "directions."
        ),
    },
    {
        "title": "Quantum Computing: A New Era in Cryptography",
        "abstract": (
            "The advent of quantum computing poses both opportunities and challenges for "
            "cryptographic systems. This paper examines the implications of quantum "
            "computing on current cryptographic protocols and proposes new "
            "quantum-resistant algorithms. We demonstrate the vulnerability of existing "
            "systems and provide a framework for developing robust quantum-safe "
            "encryption methods."
        ),
    },
    {
        "title": "Sustainable AI: Environmental Impact of Large Language Models",
        "abstract": (
            "As large language models continue to grow in size and complexity, their "
            "environmental impact becomes increasingly concerning. This study quantifies "
            "the carbon footprint of training and deploying major language models, "
            "proposing novel techniques for reducing energy consumption while "
            "maintaining performance. We present empirical evidence and practical "
            "recommendations for sustainable AI development."
        ),
    },
    {
        "title": "Emerging Trends in CRISPR Gene Editing Technologies",
        "abstract": (
            "Recent advances in CRISPR-Cas9 technology have revolutionized genetic "
            "engineering capabilities. This review examines the latest developments in "
            "CRISPR-based methods, focusing on improved precision, reduced off-target "
            "effects, and novel delivery systems. We discuss potential therapeutic "
            "applications and ethical considerations in human genome editing."
        ),
    },
    {
        "title": "Neural Networks in Climate Change Prediction",
        "abstract": (
            "This research presents a novel approach to climate change prediction using "
            "advanced neural network architectures. By incorporating multi-modal data "
            "from satellite imagery, weather stations, and historical records, our model "
            "achieves unprecedented accuracy in long-term climate forecasting. The "
            "findings have significant implications for climate adaptation strategies."
        ),
    },
    {
        "title": (
            "Superconductivity at Room Temperature: Recent Breakthroughs in "
            "Materials Science"
        ),
        "abstract": (
            "This paper presents recent experimental data on novel materials exhibiting "
            "superconducting properties at unprecedented temperatures. We detail the "
            "synthesis processes, characterization methods, and theoretical models "
            "explaining these phenomena. The discovery has profound implications for "
            "energy transmission, storage, and quantum computing applications."
        ),
    },
    {
        "title": "Molecular Mechanisms of Neurodegeneration in Alzheimer's Disease",
        "abstract": (
            "This comprehensive review examines the latest findings regarding the "
            "molecular and cellular pathways involved in Alzheimer's disease "
            "progression. We analyze the roles of amyloid-beta, tau proteins, "
            "neuroinflammation, and mitochondrial dysfunction, presenting an integrated "
            "model of disease pathogenesis. Novel therapeutic targets and approaches are "
            "discussed."
        ),
    },
    {
        "title": "Mathematical Foundations of Topological Quantum Field Theory",
        "abstract": (
            "This paper presents a rigorous mathematical framework for understanding "
            "topological quantum field theories (TQFTs). We develop new algebraic "
            "structures that capture the essential properties of quantum field theories "
            "with topological invariance. Applications to knot theory, condensed matter "
            "physics, and quantum computing are explored in detail."
        ),
    },
    {
        "title": "Synthetic Biology Approaches to Sustainable Biofuel Production",
        "abstract": (
            "We review recent advances in synthetic biology for enhanced biofuel "
            "production from renewable resources. This paper describes novel genetic "
            "engineering strategies, metabolic pathway optimization, and synthetic "
            "microbial communities designed for efficient conversion of biomass to "
            "advanced biofuels. Economic and environmental impact analyses are included."
        ),
    },
    {
        "title": (
            "Advanced Catalysts for Hydrogen Evolution Reaction: A Step Toward "
            "Sustainable Energy"
        ),
        "abstract": (
            "This research introduces a new class of non-precious metal catalysts for "
            "efficient hydrogen production through water electrolysis. We present "
            "detailed synthesis protocols, characterization data, and performance "
            "metrics showing activity comparable to platinum-based catalysts at a "
            "fraction of the cost. The findings accelerate the transition to a "
            "hydrogen-based economy."
        ),
    },
)

TOPICS: tuple[str, ...] = (
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
    "Neuroscience",
    "Materials Science",
    "Medicine",
    "Astronomy",
    "Environmental Science",
    "Agriculture",
    "Psychology",
    "Renewable Energy",
    "Data Science",
    "Genetics",
    "Virology",
    "Nutrition",
    "Nanotechnology",
    "Marine Biology",
    "Archaeology",
    "Geology",
    "Economics",
    "Cybersecurity",
    "Artificial Intelligence Ethics",
    "Machine Learning",
)

JOURNALS: tuple[str, ...] = (
    "Nature",
    "Science",
    "Cell",
    "Physical Review Letters",
    "IEEE Transactions",
    "ACM Computing Surveys",
    "PLOS ONE",
    "Journal of the American Chemical Society",
    "The Lancet",
    "New England Journal of Medicine",
    "Astrophysical Journal",
    "Journal of Materials Chemistry",
    "Bioinformatics",
    "Communications in Mathematical Physics",
    "Environmental Science & Technology",
    "Journal of Agricultural Science",
    "Psychological Review",
    "Renewable Energy",
    "Data Mining and Knowledge Discovery",
    "Genetics Research",
    "Journal of Virology",
    "American Journal of Clinical Nutrition",
    "Nanotechnology",
    "Marine Biology Research",
    "Journal of Archaeological Science",
    "Geology",
    "Journal of Economic Literature",
    "Cybersecurity Journal",
    "AI and Ethics",
    "Journal of Machine Learning Research",
)

TITLE_PREFIXES: tuple[str, ...] = (
    "Advances in",
    "Recent Developments in",
    "Novel Approaches to",
    "Breakthroughs in",
    "Applications of",
    "Innovative Methods for",
    "Exploring",
    "Analysis of",
    "Fundamentals of",
    "Critical Review of",
    "Challenges in",
    "Future Directions in",
    "Experimental Study of",
    "Theoretical Framework for",
    "Comparative Study of",
)

FIRST_NAMES: tuple[str, ...] = (
    "James", "Mary", "John", "Patricia", "Robert", "Jennifer", "Michael", "Linda",
    "William", "Elizabeth", "Wei", "Aisha", "Mohammed", "Elena", "Hiroshi", "Fatima",
    "Rajesh", "Mei", "Sven", "Priya", "Carlos", "Sofia", "Ahmed", "Olga", "Kim",
    "Ananya", "Jamal", "Chen", "Diego", "Layla",
)  # fmt: skip

LAST_NAMES: tuple[str, ...] = (
    "Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis",
    "Rodriguez", "Martinez", "Zhang", "Wang", "Singh", "Patel", "Kim", "Nguyen",
    "Chen", "Lee", "Ali", "Khan", "Müller", "Ivanov", "Suzuki", "Silva", "Rossi",
    "Kowalski", "Okafor", "Dubois", "Jensen", "Andersen",
)  # fmt: skip

INSTITUTIONS: tuple[str, ...] = (
    "University of Cambridge",
    "Stanford University",
    "MIT",
    "Harvard University",
    "Max Planck Institute",
    "Tokyo University",
    "Tsinghua University",
    "University of Toronto",
    "ETH Zurich",
    "National University of Singapore",
    "University of Cape Town",
    "University of São Paulo",
    "Indian Institute of Technology",
    "Seoul National University",
    "Australian National University",
)

# Relative weights for the source a local corpus record claims to come from.
CORPUS_SOURCE_WEIGHTS: dict[str, int] = {
    "local": 20,
    "arxiv": 20,
    "pubmed": 15,
    "ieee": 15,
    "springer": 15,
    "sciencedirect": 15,
}

JOURNALS_BY_SOURCE: dict[str, tuple[str, ...]] = {
    "arxiv": (
        "arXiv Preprint",
        "arXiv Computer Science",
        "arXiv Physics",
        "arXiv Mathematics",
    ),
    "pubmed": (
        "Journal of Medical Research",
        "Biomedical Science",
        "Clinical Reports",
        "Medical Innovations",
    ),
    "ieee": (
        "IEEE Transactions on Computing",
        "IEEE Journal of Electrical Engineering",
        "IEEE Communications Magazine",
        "IEEE Systems Journal",
    ),
    "springer": (
        "Springer Nature Reviews",
        "Journal of Scientific Computing",
        "Applied Physics Research",
        "Mathematical Programming",
    ),
    "sciencedirect": (
        "Advances in Research",
        "Journal of Materials",
        "Computational Science",
        "Environmental Studies",
    ),
    "semanticscholar": (
        "Semantic Scholar Database",
        "Journal of Artificial Intelligence",
        "Data Science Review",
        "Computational Linguistics",
    ),
    "biorxiv": (
        "bioRxiv Preprint",
        "bioRxiv Genomics",
        "bioRxiv Neuroscience",
        "bioRxiv Immunology",
    ),
    "nature": (
        "Nature",
        "Nature Communications",
        "Nature Biotechnology",
        "Nature Methods",
    ),
    "science": (
        "Science",
        "Science Advances",
        "Science Translational Medicine",
        "Science Immunology",
    ),
}
DEFAULT_JOURNALS: tuple[str, ...] = ("Journal of Research",)
