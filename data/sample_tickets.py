# data/sample_tickets.py
# (ticket text, expected heuristic severity value)

SAMPLE_TICKETS = [
    # Critical
    ("Our payment checkout is down for all users, CEO is furious, urgent!!", "🔥 On Fire"),
    ("Security breach: API token leaked and the site is down for all users", "🔥 On Fire"),
    ("Everyone lost data: records deleted, database corrupt, app is down", "🔥 On Fire"),

    # High
    ("Dashboard crashes for everyone since the last deploy", "High"),
    ("Enterprise customer reports a vulnerability, please respond ASAP", "High"),

    # Medium
    ("Stripe webhook failed for one invoice, customer is angry", "Medium"),
    ("The export page is broken", "Medium"),

    # Low
    ("Hello, I have a question about exporting reports.", "Low"),
    ("Can you add a dark theme to the settings page?", "Low"),
]
