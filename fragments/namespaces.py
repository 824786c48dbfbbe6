# SPDX-License-Identifier: MIT
#
#  █████╗ ██████╗  █████╗ ███████╗
# ██╔══██╗██╔══██╗██╔══██╗██╔════╝
# ███████║██████╔╝███████║███████╗
# ██╔══██║██╔══██╗██╔══██║╚════██║
# ██║  ██║██║  ██║██║  ██║███████║
# ╚═╝  ╚═╝╚═╝  ╚═╝╚═╝  ╚═╝╚══════╝
# Copyright (C) 2026 Riza Emre ARAS <r.emrearas@proton.me>
#
# Licensed under the MIT License.
# See LICENSE and THIRD_PARTY_LICENSES for details.

"""Vocabulary namespaces used by path queries.

Namespaces are plain prefix strings; ``iri_reference`` glues a prefix and
a local name into the bracketed form used on the wire.
"""

from __future__ import annotations

RDF = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
RDFS = "http://www.w3.org/2000/01/rdf-schema#"
FOAF = "http://xmlns.com/foaf/0.1/"
VCARD = "http://www.w3.org/2006/vcard/ns#"
VIVO = "http://vivoweb.org/ontology/core#"
BIBO = "http://purl.org/ontology/bibo/"
OBO = "http://purl.obolibrary.org/obo/"
VITRO = "http://vitro.mannlib.cornell.edu/ns/vitro/public#"
M3C = "http://www.metabolomics.info/ontologies/2019/metabolomics-consortium#"

# Hypermedia controls and dataset metadata in every fragment response.
HYDRA = "http://www.w3.org/ns/hydra/core"
VOID = "http://rdfs.org/ns/void"

CONTROL_PREFIXES: tuple[str, ...] = (HYDRA, VOID)


def iri_reference(namespace: str, fragment: str = "") -> str:
    """Return ``<namespace + fragment>``, e.g. ``<http://x.org/ns#name>``."""
    return f"<{namespace}{fragment}>"


RDF_TYPE = iri_reference(RDF, "type")
NEXT_PAGE = iri_reference(HYDRA, "#nextPage")
