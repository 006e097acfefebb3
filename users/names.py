import random

ADJECTIVES = (
    "able", "adorable", "agreeable", "ancient", "bold", "brave", "breezy",
    "bright", "calm", "careful", "cheerful", "clever", "cosmic", "curious",
    "daring", "dizzy", "eager", "electric", "fancy", "fearless", "fluffy",
    "friendly", "gentle", "giant", "glad", "graceful", "happy", "hasty",
    "honest", "humble", "jolly", "kind", "lively", "lucky", "mighty",
    "modest", "noble", "patient", "polite", "proud", "quick", "quiet",
    "rapid", "shy", "silly", "sleepy", "smooth", "sneaky", "steady",
    "swift", "tender", "tiny", "vast", "wise", "witty", "zany",
)

COLORS = (
    "amber", "apricot", "aqua", "azure", "beige", "black", "blue", "bronze",
    "brown", "coffee", "copper", "coral", "crimson", "cyan", "emerald",
    "gold", "gray", "green", "indigo", "ivory", "jade", "lavender", "lime",
    "magenta", "maroon", "mint", "navy", "olive", "orange", "peach",
    "pink", "plum", "purple", "red", "rose", "ruby", "salmon", "sapphire",
    "scarlet", "silver", "tan", "teal", "turquoise", "violet", "white",
    "yellow",
)

ANIMALS = (
    "albatross", "alpaca", "badger", "bat", "bear", "beaver", "bison",
    "camel", "cat", "cheetah", "cobra", "crab", "crane", "crow", "deer",
    "dolphin", "donkey", "eagle", "ferret", "flamingo", "fox", "frog",
    "gazelle", "gecko", "giraffe", "goose", "gorilla", "hamster", "hare",
    "hedgehog", "heron", "hippo", "ibis", "jaguar", "koala", "lemur",
    "leopard", "llama", "lobster", "lynx", "marmot", "meerkat", "mole",
    "moose", "narwhal", "octopus", "otter", "owl", "panda", "parrot",
    "pelican", "penguin", "puffin", "rabbit", "raccoon", "salamander",
    "seal", "sloth", "squid", "swan", "tiger", "toucan", "turtle",
    "walrus", "whale", "wolf", "wombat", "yak", "zebra",
)

NAME_SEPARATOR = "_"


def generate_display_name(rng: random.Random | None = None) -> str:
    """Return a memorable adjective_color_animal name such as ``brave_teal_otter``."""
    rng = rng or random
    words = [rng.choice(pool) for pool in (ADJECTIVES, COLORS, ANIMALS)]
    return NAME_SEPARATOR.join(words)
