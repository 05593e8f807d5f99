from __future__ import annotations

from enum import Enum


class InheritancePattern(str, Enum):
    AUTOSOMAL_DOMINANT = "AUTOSOMAL_DOMINANT"
    AUTOSOMAL_RECESSIVE = "AUTOSOMAL_RECESSIVE"
    X_LINKED_DOMINANT = "X_LINKED_DOMINANT"
    X_LINKED_RECESSIVE = "X_LINKED_RECESSIVE"
    POLYGENIC = "POLYGENIC"
    CODOMINANT = "CODOMINANT"
    INCOMPLETE_DOMINANCE = "INCOMPLETE_DOMINANCE"
    EPISTASIS = "EPISTASIS"


class GenotypeTestMethod(str, Enum):
    DNA_TEST = "DNA_TEST"
    PEDIGREE_ANALYSIS = "PEDIGREE_ANALYSIS"
    PHENOTYPE_EXAMINATION = "PHENOTYPE_EXAMINATION"
    CARRIER_TESTING = "CARRIER_TESTING"
    LINKAGE_TESTING = "LINKAGE_TESTING"
