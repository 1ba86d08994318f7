"""Static demo data served when the database has nothing (or fails)."""

from datetime import datetime

MARKET_LABELS = {
    "^FCHI": {"name": "CAC 40", "type": "index", "currency": "EUR"},
    "^GSPC": {"name": "S&P 500", "type": "index", "currency": "USD"},
    "^IXIC": {"name": "NASDAQ", "type": "index", "currency": "USD"},
    "BTC-USD": {"name": "Bitcoin", "type": "crypto", "currency": "USD"},
    "ETH-USD": {"name": "Ethereum", "type": "crypto", "currency": "USD"},
    "GC=F": {"name": "Or (Gold)", "type": "commodity", "currency": "USD"},
}
UNKNOWN_MARKET_LABEL = {"type": "unknown", "currency": "USD"}

MOCK_MARKET_DATA = [
    {"ticker": "^FCHI", "price": 7425.3, "change": 45.2, "change_percent": 0.61, "volume": 3200000000},
    {"ticker": "^GSPC", "price": 5890.45, "change": 22.1, "change_percent": 0.38, "volume": 4100000000},
    {"ticker": "^IXIC", "price": 18920.8, "change": -35.6, "change_percent": -0.19, "volume": 5300000000},
    {"ticker": "BTC-USD", "price": 95000, "change": 1250, "change_percent": 1.33, "volume": 28000000000},
    {"ticker": "ETH-USD", "price": 3400, "change": -45, "change_percent": -1.31, "volume": 12000000000},
    {"ticker": "GC=F", "price": 2345.6, "change": 12.3, "change_percent": 0.53, "volume": 180000},
]

ALL_NEWS_CATEGORIES = "Toutes"

MOCK_NEWS = [
    {
        "id": "mock-1",
        "title": "La BCE maintient ses taux directeurs inchangés",
        "description": (
            "Christine Lagarde a annoncé le maintien des taux, signalant une pause dans le cycle "
            "de resserrement monétaire. Les marchés européens ont bien réagi à cette annonce."
        ),
        "url": "https://example.com/bce-taux",
        "source": "Les Echos",
        "category": "Macroéconomie",
        "relevance_score": 0.95,
        "image_url": "https://images.unsplash.com/photo-1611974789855-9c2a0a7236a3?w=400",
        "published_at": datetime(2026, 2, 28, 8, 30),
    },
    {
        "id": "mock-2",
        "title": "Bitcoin franchit les 95 000$ pour la première fois",
        "description": (
            "La cryptomonnaie phare atteint un nouveau sommet historique, portée par l'adoption "
            "institutionnelle et l'approbation de nouveaux ETF Bitcoin spot."
        ),
        "url": "https://example.com/btc-95k",
        "source": "CoinDesk",
        "category": "Crypto",
        "relevance_score": 0.92,
        "image_url": "https://images.unsplash.com/photo-1518546305927-5a555bb7020d?w=400",
        "published_at": datetime(2026, 2, 28, 7, 15),
    },
    {
        "id": "mock-3",
        "title": "LVMH publie des résultats record au T4",
        "description": (
            "Le groupe de luxe français dépasse les attentes avec un CA en hausse de 13% sur le "
            "trimestre. L'action grimpe de 4% en pré-ouverture."
        ),
        "url": "https://example.com/lvmh-q4",
        "source": "Reuters",
        "category": "Actions",
        "relevance_score": 0.88,
        "image_url": "https://images.unsplash.com/photo-1441986300917-64674bd600d8?w=400",
        "published_at": datetime(2026, 2, 27, 18, 0),
    },
    {
        "id": "mock-4",
        "title": "L'immobilier parisien montre des signes de reprise",
        "description": (
            "Après deux ans de baisse, les prix au m² repartent à la hausse dans plusieurs "
            "arrondissements. Le marché reprend confiance."
        ),
        "url": "https://example.com/immo-paris",
        "source": "Les Echos",
        "category": "Immobilier",
        "relevance_score": 0.85,
        "image_url": "https://images.unsplash.com/photo-1502602898657-3e91760cbb34?w=400",
        "published_at": datetime(2026, 2, 27, 14, 30),
    },
    {
        "id": "mock-5",
        "title": "ETF : collecte record en Europe en 2025",
        "description": (
            "Les ETF européens ont collecté plus de 200 milliards d'euros cette année, un record "
            "historique. Les investisseurs privilégient l'indiciel."
        ),
        "url": "https://example.com/etf-record",
        "source": "Reuters",
        "category": "ETF",
        "relevance_score": 0.82,
        "image_url": "https://images.unsplash.com/photo-1590283603385-17ffb3a7f29f?w=400",
        "published_at": datetime(2026, 2, 27, 10, 0),
    },
    {
        "id": "mock-6",
        "title": "Solana dépasse Ethereum en transactions quotidiennes",
        "description": (
            "Le réseau Solana traite désormais plus de transactions par jour qu'Ethereum, "
            "marquant un tournant dans la guerre des blockchains."
        ),
        "url": "https://example.com/sol-eth",
        "source": "CoinDesk",
        "category": "Crypto",
        "relevance_score": 0.78,
        "image_url": "https://images.unsplash.com/photo-1639762681485-074b7f938ba0?w=400",
        "published_at": datetime(2026, 2, 26, 16, 45),
    },
    {
        "id": "mock-7",
        "title": "La Fed signale une possible baisse des taux au T2 2026",
        "description": (
            "Jerome Powell a indiqué que les conditions économiques pourraient justifier un "
            "assouplissement monétaire au deuxième trimestre."
        ),
        "url": "https://example.com/fed-rates",
        "source": "Bloomberg",
        "category": "Macroéconomie",
        "relevance_score": 0.93,
        "image_url": "https://images.unsplash.com/photo-1526304640581-d334cdbbf45e?w=400",
        "published_at": datetime(2026, 2, 26, 20, 0),
    },
    {
        "id": "mock-8",
        "title": "Amundi lance un nouvel ETF ESG à frais réduits",
        "description": (
            "Le géant de la gestion passive propose un ETF World ESG avec des frais de 0.12%, "
            "le plus bas du marché européen."
        ),
        "url": "https://example.com/amundi-etf",
        "source": "Boursorama",
        "category": "ETF",
        "relevance_score": 0.75,
        "image_url": "https://images.unsplash.com/photo-1460925895917-afdab827c52f?w=400",
        "published_at": datetime(2026, 2, 26, 9, 0),
    },
]

MOCK_WATCHLIST = [
    {"id": "mock-1", "ticker": "NVDA", "name": "NVIDIA", "type": "stock"},
    {"id": "mock-2", "ticker": "ASML.AS", "name": "ASML Holding", "type": "stock"},
    {"id": "mock-3", "ticker": "ADA-USD", "name": "Cardano", "type": "crypto"},
    {"id": "mock-4", "ticker": "IWDA.AS", "name": "iShares MSCI World", "type": "etf"},
]
