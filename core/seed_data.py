"""
Static example articles used by the landing and listing pages

Content is trusted HTML authored here; it is served without sanitization.
"""

SEED_ARTICLES = (
    {
        "id": "1",
        "title": "Getting Started with React Hooks",
        "excerpt": "Learn how hooks replace class lifecycles and make component state easier to share.",
        "content": (
            "<h2>Why hooks?</h2>"
            "<p>Hooks let function components hold state and run side effects without classes.</p>"
            "<h2>useState and useEffect</h2>"
            "<p>Start with <code>useState</code> for local values and <code>useEffect</code> for data fetching.</p>"
            "<h2>Custom hooks</h2>"
            "<p>Extract shared logic into custom hooks so every page reads the same way.</p>"
        ),
        "author": "Sarah Johnson",
        "category": "Technology",
        "tags": ["React", "JavaScript", "Frontend"],
        "date": "2024-01-15",
        "read_time": "5 min read",
        "featured": True,
        "banner_image": "https://images.unsplash.com/photo-1633356122544-f134324a6cee",
    },
    {
        "id": "2",
        "title": "Web Performance Optimization Tips",
        "excerpt": "Practical techniques to make your site load faster and feel snappier.",
        "content": (
            "<h2>Measure first</h2>"
            "<p>Use Lighthouse and real user metrics before changing anything.</p>"
            "<h2>Ship less</h2>"
            "<p>Code splitting, image compression and caching give the biggest performance wins.</p>"
        ),
        "author": "Michael Chen",
        "category": "Technology",
        "tags": ["Performance", "Web", "Optimization"],
        "date": "2024-01-10",
        "read_time": "8 min read",
        "featured": True,
        "banner_image": "https://images.unsplash.com/photo-1460925895917-afdab827c52f",
    },
    {
        "id": "3",
        "title": "A Week in Kyoto on a Budget",
        "excerpt": "Temples, tea houses and night markets without breaking the bank.",
        "content": (
            "<h2>Getting around</h2>"
            "<p>A bus day pass covers most of the city sights.</p>"
            "<h2>Where to eat</h2>"
            "<p>Nishiki Market is perfect for cheap street food.</p>"
        ),
        "author": "Emma Wilson",
        "category": "Travel",
        "tags": ["Japan", "Budget", "Culture"],
        "date": "2024-01-05",
        "read_time": "6 min read",
        "featured": False,
        "banner_image": "https://images.unsplash.com/photo-1493976040374-85c8e12f0c0e",
    },
    {
        "id": "4",
        "title": "Sourdough From Scratch",
        "excerpt": "Everything you need to bake your first loaf at home.",
        "content": (
            "<h2>The starter</h2>"
            "<p>Feed flour and water daily for a week until it doubles reliably.</p>"
            "<h2>Baking day</h2>"
            "<p>Long cold fermentation gives the best flavor and crust.</p>"
        ),
        "author": "Luca Romano",
        "category": "Food",
        "tags": ["Baking", "Bread", "Recipes"],
        "date": "2023-12-28",
        "read_time": "7 min read",
        "featured": True,
        "banner_image": "https://images.unsplash.com/photo-1509440159596-0249088772ff",
    },
    {
        "id": "5",
        "title": "Building a Morning Routine That Sticks",
        "excerpt": "Small habits that compound into calmer, more productive days.",
        "content": (
            "<h2>Start tiny</h2>"
            "<p>Pick one habit and attach it to something you already do.</p>"
            "<h2>Track it</h2>"
            "<p>A simple checklist keeps the streak visible.</p>"
        ),
        "author": "Priya Patel",
        "category": "Lifestyle",
        "tags": ["Habits", "Productivity", "Wellbeing"],
        "date": "2023-12-20",
        "read_time": "4 min read",
        "featured": False,
        "banner_image": "https://images.unsplash.com/photo-1499750310107-5fef28a66643",
    },
    {
        "id": "6",
        "title": "Pricing Your First SaaS Product",
        "excerpt": "How to pick tiers, anchor prices and avoid leaving money on the table.",
        "content": (
            "<h2>Value metrics</h2>"
            "<p>Charge for the unit that grows with customer success.</p>"
            "<h2>Iterate</h2>"
            "<p>Revisit pricing every quarter as you learn what customers value.</p>"
        ),
        "author": "David Okafor",
        "category": "Business",
        "tags": ["SaaS", "Pricing", "Startups"],
        "date": "2023-12-12",
        "read_time": "9 min read",
        "featured": False,
        "banner_image": "https://images.unsplash.com/photo-1454165804606-c3d57bc86b40",
    },
)


def get_seed_article(article_id: str):
    """Exact-id lookup over the seed articles; None when absent"""
    for article in SEED_ARTICLES:
        if article["id"] == article_id:
            return article
    return None
