"""
Bindings for the Genomics API.

    from gapirest.access import authorized_session
    from gapirest.genomics.v1beta2 import GenomicsService

    genomics = GenomicsService(authorized_session("genomics"))
    dataset = genomics.datasets.get("10473108253681171589").execute()
"""
