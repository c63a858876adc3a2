"""
Tag Categories

Two-level parent > child hierarchy for the flat tags carried
by entities. Searching a parent category matches every child.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TagCategory:
    """A parent category and its ordered child tags."""
    id: str
    label: str
    children: tuple[str, ...]


TAG_TAXONOMY: tuple[TagCategory, ...] = (
    # Entity types
    TagCategory("type", "Type", (
        "movie", "film", "book", "novel", "short-story", "television", "tv-show",
    )),

    # Characters (franchise-specific)
    TagCategory("characters", "Characters", (
        "alfred-pennyworth", "bruce-wayne", "batman", "joker", "catwoman",
        "commissioner-gordon", "bane", "doc-brown", "marty-mcfly", "biff-tannen",
        "michael-corleone", "vito-corleone", "don-corleone", "frodo", "gandalf",
        "aragorn", "sauron", "gollum", "sherlock-holmes", "john-watson",
        "moriarty", "james-bond", "hari-seldon",
    )),

    TagCategory("genre", "Genre", (
        "action", "adventure", "comedy", "crime", "drama", "fantasy", "horror",
        "mystery", "romance", "sci-fi", "science-fiction", "thriller", "western",
        "noir", "espionage", "spy-fiction", "cyberpunk", "heist", "satire",
        "musical", "animation", "documentary", "war", "biographical",
    )),

    TagCategory("theme", "Theme", (
        "loyalty", "betrayal", "redemption", "revenge", "justice", "corruption",
        "power", "ambition", "family", "identity", "sacrifice", "survival",
        "freedom", "isolation", "obsession", "paranoia", "morality", "deception",
        "trust", "honor", "duty", "legacy", "fate", "destiny", "love", "loss",
        "grief", "hope", "fear", "greed", "transformation", "coming-of-age",
    )),

    # Era / period
    TagCategory("era", "Era", (
        "ancient", "medieval", "renaissance", "victorian", "edwardian",
        "1920s", "1930s", "1940s", "1950s", "1960s", "1970s", "1980s", "1990s",
        "2000s", "2010s", "2020s", "cold-war", "post-war", "futuristic",
        "near-future", "far-future", "timeless", "19th-century", "20th-century",
        "21st-century",
    )),

    TagCategory("tone", "Tone", (
        "dark", "light", "gritty", "whimsical", "cerebral", "atmospheric",
        "suspenseful", "tense", "dramatic", "comedic", "tragic", "epic",
        "intimate", "surreal", "dreamlike", "nostalgic", "melancholic", "hopeful",
        "bleak", "campy", "satirical", "heartfelt",
    )),

    TagCategory("setting", "Setting", (
        "urban", "rural", "suburban", "industrial", "gothic", "dystopian",
        "utopian", "post-apocalyptic", "underwater", "underground", "space",
        "desert", "jungle", "forest", "mountain", "coastal", "island",
        "metropolitan", "small-town", "wilderness",
    )),

    # Franchise / universe
    TagCategory("franchise", "Franchise", (
        "batman", "dc-universe", "dark-knight", "gotham", "james-bond", "007",
        "mi6", "back-to-the-future", "hill-valley", "the-godfather", "corleone",
        "middle-earth", "lord-of-the-rings", "the-hobbit", "foundation",
        "foundation-series", "discworld", "sherlock-holmes", "neuromancer",
        "sprawl", "inception", "tenet", "interstellar", "the-prestige",
        "oppenheimer", "christopher-nolan",
    )),

    TagCategory("skill", "Skill", (
        "combat", "martial-arts", "stealth", "tactical", "strategic", "marksman",
        "hacking", "engineering", "scientific", "medical", "legal", "political",
        "diplomatic", "linguistic", "artistic", "musical", "athletic",
        "acrobatic", "driving", "piloting", "leadership", "investigation",
        "deduction",
    )),

    # Personality
    TagCategory("trait", "Trait", (
        "loyal", "brave", "cunning", "wise", "cruel", "ruthless", "ambitious",
        "charismatic", "intelligent", "resourceful", "determined", "manipulative",
        "mysterious", "enigmatic", "charming", "witty", "arrogant", "stoic",
        "eccentric", "calculating", "patient", "fierce", "cold", "clever",
        "cynical", "idealistic", "pragmatic", "honorable", "fearless",
        "compassionate", "vengeful",
    )),

    # Visual / aesthetic
    TagCategory("style", "Style", (
        "gothic", "art-deco", "noir", "neon", "retro", "vintage", "classic",
        "modern", "futuristic", "sleek", "ornate", "minimalist", "baroque",
        "industrial", "brutalist", "elegant", "cinematic", "iconic",
    )),

    # Real-world locations
    TagCategory("place", "Place", (
        "california", "new-york", "london", "paris", "los-angeles", "chicago",
        "tokyo", "las-vegas", "italy", "england", "france", "germany", "japan",
        "hollywood", "manhattan", "san-francisco", "washington-dc", "moscow",
        "berlin",
    )),

    TagCategory("narrative", "Narrative", (
        "twist", "plot-twist", "flashback", "nonlinear", "unreliable-narrator",
        "mcguffin", "cliffhanger", "foreshadowing", "origin-story", "sequel",
        "prequel", "trilogy", "ensemble", "character-driven", "action-driven",
        "dialogue-heavy", "visual-storytelling",
    )),

    TagCategory("recognition", "Recognition", (
        "academy-award", "academy-award-winner", "academy-award-nominee",
        "oscar-winner", "golden-globe", "bafta", "acclaimed", "award-winning",
        "critically-acclaimed", "cult-classic", "blockbuster", "box-office-hit",
        "classic", "legendary", "influential",
    )),

    # Profession / occupation
    TagCategory("role", "Role", (
        "actor", "actress", "director", "writer", "producer", "composer",
        "cinematographer", "scientist", "spy", "detective", "mobster",
        "businessman", "soldier", "agent", "assassin", "thief", "lawyer",
        "doctor", "politician", "journalist", "engineer", "pilot", "captain",
        "butler", "mentor", "villain", "hero", "antihero",
    )),
)
