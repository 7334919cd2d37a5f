# Parameters of the Ed25519 public-key text format

# Algorithm identity
KEY_ALGORITHM = "EdDSA"
ALGORITHM_ALIASES = frozenset({"EdDSA", "Ed25519"})
ED25519_KEY_SIZE = 32

# ASCII armor
ARMOR_MARKER = "----BEGIN"
PEM_HEADER = "-----BEGIN PUBLIC KEY-----"
PEM_FOOTER = "-----END PUBLIC KEY-----"
PEM_LINE_WIDTH = 64
LINE_BREAKS = ("\r\n", "\n", "\r")
