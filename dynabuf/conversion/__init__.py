# ==============================================
# TOPIC 3: CONVERSION
# ==============================================
#
# The two pipelines built on top of the classification and codec
# topics.
#
# Modules:
# --------
# - encoder.py  → message(s) → attribute map(s)
# - decoder.py  → attribute map(s) → message(s)
#
# ==============================================

from .encoder import Encoder
from .decoder import Decoder

__all__ = ["Encoder", "Decoder"]
