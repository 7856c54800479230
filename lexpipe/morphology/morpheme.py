"""
Morphemes and morphological tags.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Morpheme:
    form: str
    pos: str

    def __str__(self) -> str:
        return f"{self.form}/{self.pos}"


class MorphTag:
    # Base POS
    VB = "VB"
    NN = "NN"
    JJ = "JJ"
    RB = "RB"

    # Inflectional affixes
    I_3PS = "I_3PS"   # 3rd-person singular present
    I_GRD = "I_GRD"   # gerund
    I_PST = "I_PST"   # past tense
    I_PPT = "I_PPT"   # past participle
    I_PLR = "I_PLR"   # plural
    I_COM = "I_COM"   # comparative
    I_SUP = "I_SUP"   # superlative

    # Lemma placeholders
    LEMMA_URL = "#url#"
    LEMMA_ORDINAL = "#ord#"
    LEMMA_CARDINAL = "#crd#"
