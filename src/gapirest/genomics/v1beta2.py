"""
Genomics API v1beta2

Provides access to Genomics data.
See https://developers.google.com/genomics/v1beta2/reference

Generated by gapirest.generator from the genomics:v1beta2 discovery document.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from gapirest.resources import ApiResource, INT64
from gapirest.service import ApiCall, ApiService, ResourceService

API_ID = "genomics:v1beta2"
API_NAME = "genomics"
API_VERSION = "v1beta2"
BASE_URL = "https://www.googleapis.com/genomics/v1beta2/"

# View and manage your data in Google BigQuery
BIGQUERY_SCOPE = "https://www.googleapis.com/auth/bigquery"
# Manage your data in Google Cloud Storage
DEVSTORAGE_READ_WRITE_SCOPE = "https://www.googleapis.com/auth/devstorage.read_write"
# View and manage Genomics data
GENOMICS_SCOPE = "https://www.googleapis.com/auth/genomics"
# View Genomics data
GENOMICS_READONLY_SCOPE = "https://www.googleapis.com/auth/genomics.readonly"


@dataclass
class Call(ApiResource):
    callSetId: str|None = field(default=None)
    callSetName: str|None = field(default=None)
    genotype: List[int]|None = field(default=None)
    genotypeLikelihood: List[float]|None = field(default=None)
    info: dict[str, List[str]]|None = field(default=None)
    phaseset: str|None = field(default=None)


@dataclass
class CallSet(ApiResource):
    created: int|None = field(default=None, metadata=INT64)
    id: str|None = field(default=None)
    info: dict[str, List[str]]|None = field(default=None)
    name: str|None = field(default=None)
    sampleId: str|None = field(default=None)
    variantSetIds: List[str]|None = field(default=None)


@dataclass
class Dataset(ApiResource):
    id: str|None = field(default=None)
    isPublic: bool|None = field(default=None)
    name: str|None = field(default=None)
    projectNumber: int|None = field(default=None, metadata=INT64)


@dataclass
class ExperimentalCreateJobRequest(ApiResource):
    align: bool|None = field(default=None)
    callVariants: bool|None = field(default=None)
    gcsOutputPath: str|None = field(default=None)
    pairedSourceUris: List[str]|None = field(default=None)
    projectNumber: int|None = field(default=None, metadata=INT64)
    sourceUris: List[str]|None = field(default=None)


@dataclass
class ExperimentalCreateJobResponse(ApiResource):
    jobId: str|None = field(default=None)


@dataclass
class ExportVariantSetRequest(ApiResource):
    bigqueryDataset: str|None = field(default=None)
    bigqueryTable: str|None = field(default=None)
    callSetIds: List[str]|None = field(default=None)
    format: str|None = field(default=None)
    projectNumber: int|None = field(default=None, metadata=INT64)


@dataclass
class ExportVariantSetResponse(ApiResource):
    jobId: str|None = field(default=None)


@dataclass
class ImportVariantsRequest(ApiResource):
    format: str|None = field(default=None)
    sourceUris: List[str]|None = field(default=None)


@dataclass
class ImportVariantsResponse(ApiResource):
    jobId: str|None = field(default=None)


@dataclass
class Job(ApiResource):
    created: int|None = field(default=None, metadata=INT64)
    detailedStatus: str|None = field(default=None)
    errors: List[str]|None = field(default=None)
    id: str|None = field(default=None)
    importedIds: List[str]|None = field(default=None)
    projectNumber: int|None = field(default=None, metadata=INT64)
    request: JobRequest|None = field(default=None)
    status: str|None = field(default=None)
    warnings: List[str]|None = field(default=None)


@dataclass
class JobRequest(ApiResource):
    destination: List[str]|None = field(default=None)
    source: List[str]|None = field(default=None)
    type: str|None = field(default=None)


@dataclass
class ListBasesResponse(ApiResource):
    nextPageToken: str|None = field(default=None)
    offset: int|None = field(default=None, metadata=INT64)
    sequence: str|None = field(default=None)


@dataclass
class ListDatasetsResponse(ApiResource):
    datasets: List[Dataset]|None = field(default=None)
    nextPageToken: str|None = field(default=None)


@dataclass
class MergeVariantsRequest(ApiResource):
    variants: List[Variant]|None = field(default=None)


@dataclass
class Metadata(ApiResource):
    description: str|None = field(default=None)
    id: str|None = field(default=None)
    info: dict[str, List[str]]|None = field(default=None)
    key: str|None = field(default=None)
    number: str|None = field(default=None)
    type: str|None = field(default=None)
    value: str|None = field(default=None)


@dataclass
class Reference(ApiResource):
    id: str|None = field(default=None)
    length: int|None = field(default=None, metadata=INT64)
    md5checksum: str|None = field(default=None)
    name: str|None = field(default=None)
    ncbiTaxonId: int|None = field(default=None)
    sourceAccessions: List[str]|None = field(default=None)
    sourceURI: str|None = field(default=None)


@dataclass
class ReferenceBound(ApiResource):
    referenceName: str|None = field(default=None)
    upperBound: int|None = field(default=None, metadata=INT64)


@dataclass
class SearchCallSetsRequest(ApiResource):
    name: str|None = field(default=None)
    pageSize: int|None = field(default=None)
    pageToken: str|None = field(default=None)
    variantSetIds: List[str]|None = field(default=None)


@dataclass
class SearchCallSetsResponse(ApiResource):
    callSets: List[CallSet]|None = field(default=None)
    nextPageToken: str|None = field(default=None)


@dataclass
class SearchJobsRequest(ApiResource):
    createdAfter: int|None = field(default=None, metadata=INT64)
    createdBefore: int|None = field(default=None, metadata=INT64)
    pageSize: int|None = field(default=None)
    pageToken: str|None = field(default=None)
    projectNumber: int|None = field(default=None, metadata=INT64)
    status: List[str]|None = field(default=None)


@dataclass
class SearchJobsResponse(ApiResource):
    jobs: List[Job]|None = field(default=None)
    nextPageToken: str|None = field(default=None)


@dataclass
class SearchVariantSetsRequest(ApiResource):
    datasetIds: List[str]|None = field(default=None)
    pageSize: int|None = field(default=None)
    pageToken: str|None = field(default=None)


@dataclass
class SearchVariantSetsResponse(ApiResource):
    nextPageToken: str|None = field(default=None)
    variantSets: List[VariantSet]|None = field(default=None)


@dataclass
class SearchVariantsRequest(ApiResource):
    callSetIds: List[str]|None = field(default=None)
    end: int|None = field(default=None, metadata=INT64)
    maxCalls: int|None = field(default=None)
    pageSize: int|None = field(default=None)
    pageToken: str|None = field(default=None)
    referenceName: str|None = field(default=None)
    start: int|None = field(default=None, metadata=INT64)
    variantName: str|None = field(default=None)
    variantSetIds: List[str]|None = field(default=None)


@dataclass
class SearchVariantsResponse(ApiResource):
    nextPageToken: str|None = field(default=None)
    variants: List[Variant]|None = field(default=None)


@dataclass
class Variant(ApiResource):
    alternateBases: List[str]|None = field(default=None)
    calls: List[Call]|None = field(default=None)
    created: int|None = field(default=None, metadata=INT64)
    end: int|None = field(default=None, metadata=INT64)
    filter: List[str]|None = field(default=None)
    id: str|None = field(default=None)
    info: dict[str, List[str]]|None = field(default=None)
    names: List[str]|None = field(default=None)
    quality: float|None = field(default=None)
    referenceBases: str|None = field(default=None)
    referenceName: str|None = field(default=None)
    start: int|None = field(default=None, metadata=INT64)
    variantSetId: str|None = field(default=None)


@dataclass
class VariantSet(ApiResource):
    datasetId: str|None = field(default=None)
    id: str|None = field(default=None)
    metadata: List[Metadata]|None = field(default=None)
    referenceBounds: List[ReferenceBound]|None = field(default=None)


class CallsetsCreateCall(ApiCall):
    method = "POST"
    path = "callsets"
    response = CallSet


class CallsetsDeleteCall(ApiCall):
    method = "DELETE"
    path = "callsets/{callSetId}"


class CallsetsGetCall(ApiCall):
    method = "GET"
    path = "callsets/{callSetId}"
    response = CallSet


class CallsetsPatchCall(ApiCall):
    method = "PATCH"
    path = "callsets/{callSetId}"
    response = CallSet


class CallsetsSearchCall(ApiCall):
    method = "POST"
    path = "callsets/search"
    response = SearchCallSetsResponse


class CallsetsUpdateCall(ApiCall):
    method = "PUT"
    path = "callsets/{callSetId}"
    response = CallSet


class CallsetsService(ResourceService):
    def create(self, callSet: CallSet|dict) -> CallsetsCreateCall:
        """Creates a new call set."""
        return CallsetsCreateCall(self.service, body=callSet)

    def delete(self, callSetId: str) -> CallsetsDeleteCall:
        """Deletes a call set."""
        return CallsetsDeleteCall(self.service, path_params={"callSetId": callSetId})

    def get(self, callSetId: str) -> CallsetsGetCall:
        """Gets a call set by ID."""
        return CallsetsGetCall(self.service, path_params={"callSetId": callSetId})

    def patch(self, callSetId: str, callSet: CallSet|dict) -> CallsetsPatchCall:
        """Updates a call set. This method supports patch semantics."""
        return CallsetsPatchCall(self.service, path_params={"callSetId": callSetId}, body=callSet)

    def search(self, searchCallSetsRequest: SearchCallSetsRequest|dict) -> CallsetsSearchCall:
        """
        Gets a list of call sets matching the criteria. Implements
        GlobalAllianceApi.searchCallSets.
        """
        return CallsetsSearchCall(self.service, body=searchCallSetsRequest)

    def update(self, callSetId: str, callSet: CallSet|dict) -> CallsetsUpdateCall:
        """Updates a call set."""
        return CallsetsUpdateCall(self.service, path_params={"callSetId": callSetId}, body=callSet)


class DatasetsCreateCall(ApiCall):
    method = "POST"
    path = "datasets"
    response = Dataset


class DatasetsDeleteCall(ApiCall):
    method = "DELETE"
    path = "datasets/{datasetId}"


class DatasetsGetCall(ApiCall):
    method = "GET"
    path = "datasets/{datasetId}"
    response = Dataset


class DatasetsListCall(ApiCall):
    method = "GET"
    path = "datasets"
    response = ListDatasetsResponse

    def pageSize(self, pageSize: int) -> DatasetsListCall:
        """The maximum number of results returned by this request."""
        return self._query("pageSize", pageSize)

    def pageToken(self, pageToken: str) -> DatasetsListCall:
        """
        The continuation token, which is used to page through large result sets.
        To get the next page of results, set this parameter to the value of
        nextPageToken from the previous response.
        """
        return self._query("pageToken", pageToken)

    def projectNumber(self, projectNumber: int) -> DatasetsListCall:
        """
        Only return datasets which belong to this Google Developers Console
        project. Only accepts project numbers. Returns all public projects if no
        project number is specified.
        """
        return self._query("projectNumber", projectNumber)


class DatasetsPatchCall(ApiCall):
    method = "PATCH"
    path = "datasets/{datasetId}"
    response = Dataset


class DatasetsUndeleteCall(ApiCall):
    method = "POST"
    path = "datasets/{datasetId}/undelete"
    response = Dataset


class DatasetsUpdateCall(ApiCall):
    method = "PUT"
    path = "datasets/{datasetId}"
    response = Dataset


class DatasetsService(ResourceService):
    def create(self, dataset: Dataset|dict) -> DatasetsCreateCall:
        """Creates a new dataset."""
        return DatasetsCreateCall(self.service, body=dataset)

    def delete(self, datasetId: str) -> DatasetsDeleteCall:
        """Deletes a dataset."""
        return DatasetsDeleteCall(self.service, path_params={"datasetId": datasetId})

    def get(self, datasetId: str) -> DatasetsGetCall:
        """Gets a dataset by ID."""
        return DatasetsGetCall(self.service, path_params={"datasetId": datasetId})

    def list(self) -> DatasetsListCall:
        """Lists all datasets."""
        return DatasetsListCall(self.service)

    def patch(self, datasetId: str, dataset: Dataset|dict) -> DatasetsPatchCall:
        """Updates a dataset. This method supports patch semantics."""
        return DatasetsPatchCall(self.service, path_params={"datasetId": datasetId}, body=dataset)

    def undelete(self, datasetId: str) -> DatasetsUndeleteCall:
        """
        Undeletes a dataset by restoring a dataset which was deleted via this
        API. This operation is only possible for a week after the deletion
        occurred.
        """
        return DatasetsUndeleteCall(self.service, path_params={"datasetId": datasetId})

    def update(self, datasetId: str, dataset: Dataset|dict) -> DatasetsUpdateCall:
        """Updates a dataset."""
        return DatasetsUpdateCall(self.service, path_params={"datasetId": datasetId}, body=dataset)


class ExperimentalJobsCreateCall(ApiCall):
    method = "POST"
    path = "experimental/jobs/create"
    response = ExperimentalCreateJobResponse


class ExperimentalJobsService(ResourceService):
    def create(self, experimentalCreateJobRequest: ExperimentalCreateJobRequest|dict) -> ExperimentalJobsCreateCall:
        """
        Creates and asynchronously runs an ad-hoc job. This is an experimental
        call and may be removed or changed at any time.
        """
        return ExperimentalJobsCreateCall(self.service, body=experimentalCreateJobRequest)


class ExperimentalService(ResourceService):
    def __init__(self, service: ApiService) -> None:
        super().__init__(service)
        self.jobs = ExperimentalJobsService(service)


class JobsCancelCall(ApiCall):
    method = "POST"
    path = "jobs/{jobId}/cancel"


class JobsGetCall(ApiCall):
    method = "GET"
    path = "jobs/{jobId}"
    response = Job


class JobsSearchCall(ApiCall):
    method = "POST"
    path = "jobs/search"
    response = SearchJobsResponse


class JobsService(ResourceService):
    def cancel(self, jobId: str) -> JobsCancelCall:
        """
        Cancels a job by ID. Note that it is possible for partial results to be
        generated and stored for cancelled jobs.
        """
        return JobsCancelCall(self.service, path_params={"jobId": jobId})

    def get(self, jobId: str) -> JobsGetCall:
        """Gets a job by ID."""
        return JobsGetCall(self.service, path_params={"jobId": jobId})

    def search(self, searchJobsRequest: SearchJobsRequest|dict) -> JobsSearchCall:
        """Gets a list of jobs matching the criteria."""
        return JobsSearchCall(self.service, body=searchJobsRequest)


class ReferencesGetCall(ApiCall):
    method = "GET"
    path = "references/{referenceId}"
    response = Reference


class ReferencesBasesListCall(ApiCall):
    method = "GET"
    path = "references/{referenceId}/bases"
    response = ListBasesResponse

    def end(self, end: int) -> ReferencesBasesListCall:
        """
        The end position (0-based, exclusive) of this query. Defaults to the
        length of this reference.
        """
        return self._query("end", end)

    def pageSize(self, pageSize: int) -> ReferencesBasesListCall:
        """Specifies the maximum number of bases to return in a single page."""
        return self._query("pageSize", pageSize)

    def pageToken(self, pageToken: str) -> ReferencesBasesListCall:
        """
        The continuation token, which is used to page through large result sets.
        To get the next page of results, set this parameter to the value of
        nextPageToken from the previous response.
        """
        return self._query("pageToken", pageToken)

    def start(self, start: int) -> ReferencesBasesListCall:
        """The start position (0-based) of this query. Defaults to 0."""
        return self._query("start", start)


class ReferencesBasesService(ResourceService):
    def list(self, referenceId: str) -> ReferencesBasesListCall:
        """
        Lists the bases in a reference, optionally restricted to a range.
        Implements GlobalAllianceApi.getReferenceBases.
        """
        return ReferencesBasesListCall(self.service, path_params={"referenceId": referenceId})


class ReferencesService(ResourceService):
    def __init__(self, service: ApiService) -> None:
        super().__init__(service)
        self.bases = ReferencesBasesService(service)

    def get(self, referenceId: str) -> ReferencesGetCall:
        """Gets a reference. Implements GlobalAllianceApi.getReference."""
        return ReferencesGetCall(self.service, path_params={"referenceId": referenceId})


class VariantsCreateCall(ApiCall):
    method = "POST"
    path = "variants"
    response = Variant


class VariantsDeleteCall(ApiCall):
    method = "DELETE"
    path = "variants/{variantId}"


class VariantsGetCall(ApiCall):
    method = "GET"
    path = "variants/{variantId}"
    response = Variant


class VariantsSearchCall(ApiCall):
    method = "POST"
    path = "variants/search"
    response = SearchVariantsResponse


class VariantsUpdateCall(ApiCall):
    method = "PUT"
    path = "variants/{variantId}"
    response = Variant


class VariantsService(ResourceService):
    def create(self, variant: Variant|dict) -> VariantsCreateCall:
        """Creates a new variant."""
        return VariantsCreateCall(self.service, body=variant)

    def delete(self, variantId: str) -> VariantsDeleteCall:
        """Deletes a variant."""
        return VariantsDeleteCall(self.service, path_params={"variantId": variantId})

    def get(self, variantId: str) -> VariantsGetCall:
        """Gets a variant by ID."""
        return VariantsGetCall(self.service, path_params={"variantId": variantId})

    def search(self, searchVariantsRequest: SearchVariantsRequest|dict) -> VariantsSearchCall:
        """
        Gets a list of variants matching the criteria. Implements
        GlobalAllianceApi.searchVariants.
        """
        return VariantsSearchCall(self.service, body=searchVariantsRequest)

    def update(self, variantId: str, variant: Variant|dict) -> VariantsUpdateCall:
        """
        Updates a variant's names and info fields. All other modifications are
        silently ignored. Returns the modified variant without its calls.
        """
        return VariantsUpdateCall(self.service, path_params={"variantId": variantId}, body=variant)


class VariantsetsDeleteCall(ApiCall):
    method = "DELETE"
    path = "variantsets/{variantSetId}"


class VariantsetsExportCall(ApiCall):
    method = "POST"
    path = "variantsets/{variantSetId}/export"
    response = ExportVariantSetResponse


class VariantsetsGetCall(ApiCall):
    method = "GET"
    path = "variantsets/{variantSetId}"
    response = VariantSet


class VariantsetsImportVariantsCall(ApiCall):
    method = "POST"
    path = "variantsets/{variantSetId}/importVariants"
    response = ImportVariantsResponse


class VariantsetsMergeVariantsCall(ApiCall):
    method = "POST"
    path = "variantsets/{variantSetId}/mergeVariants"


class VariantsetsPatchCall(ApiCall):
    method = "PATCH"
    path = "variantsets/{variantSetId}"
    response = VariantSet


class VariantsetsSearchCall(ApiCall):
    method = "POST"
    path = "variantsets/search"
    response = SearchVariantSetsResponse


class VariantsetsUpdateCall(ApiCall):
    method = "PUT"
    path = "variantsets/{variantSetId}"
    response = VariantSet


class VariantsetsService(ResourceService):
    def delete(self, variantSetId: str) -> VariantsetsDeleteCall:
        """
        Deletes the contents of a variant set. The variant set object is not
        deleted.
        """
        return VariantsetsDeleteCall(self.service, path_params={"variantSetId": variantSetId})

    def export(self, variantSetId: str, exportVariantSetRequest: ExportVariantSetRequest|dict) -> VariantsetsExportCall:
        """Exports variant set data to an external destination."""
        return VariantsetsExportCall(self.service, path_params={"variantSetId": variantSetId}, body=exportVariantSetRequest)

    def get(self, variantSetId: str) -> VariantsetsGetCall:
        """Gets a variant set by ID."""
        return VariantsetsGetCall(self.service, path_params={"variantSetId": variantSetId})

    def importVariants(self, variantSetId: str, importVariantsRequest: ImportVariantsRequest|dict) -> VariantsetsImportVariantsCall:
        """
        Creates variant data by asynchronously importing the provided
        information. The variants for import will be merged with any existing
        data and each other according to the behavior of mergeVariants. In
        particular, this means for merged VCF variants that have conflicting
        INFO fields, some data will be arbitrarily discarded. As a special case,
        for single-sample VCF files, QUAL and FILTER fields will be moved to the
        call level; these are sometimes interpreted in a call-specific context.
        Imported VCF headers are appended to the metadata already in a variant
        set.
        """
        return VariantsetsImportVariantsCall(self.service, path_params={"variantSetId": variantSetId}, body=importVariantsRequest)

    def mergeVariants(self, variantSetId: str, mergeVariantsRequest: MergeVariantsRequest|dict) -> VariantsetsMergeVariantsCall:
        """
        Merges the given variants with existing variants. Each variant will be
        merged with an existing variant that matches its reference sequence,
        start, end, reference bases, and alternative bases. If no such variant
        exists, a new one will be created. When variants are merged, the call
        information from the new variant is added to the existing variant, and
        other fields (such as key/value pairs) are discarded.
        """
        return VariantsetsMergeVariantsCall(self.service, path_params={"variantSetId": variantSetId}, body=mergeVariantsRequest)

    def patch(self, variantSetId: str, variantSet: VariantSet|dict) -> VariantsetsPatchCall:
        """
        Updates a variant set's metadata. All other modifications are silently
        ignored. This method supports patch semantics.
        """
        return VariantsetsPatchCall(self.service, path_params={"variantSetId": variantSetId}, body=variantSet)

    def search(self, searchVariantSetsRequest: SearchVariantSetsRequest|dict) -> VariantsetsSearchCall:
        """
        Returns a list of all variant sets matching search criteria. Implements
        GlobalAllianceApi.searchVariantSets.
        """
        return VariantsetsSearchCall(self.service, body=searchVariantSetsRequest)

    def update(self, variantSetId: str, variantSet: VariantSet|dict) -> VariantsetsUpdateCall:
        """
        Updates a variant set's metadata. All other modifications are silently
        ignored.
        """
        return VariantsetsUpdateCall(self.service, path_params={"variantSetId": variantSetId}, body=variantSet)


class GenomicsService(ApiService):
    """Genomics API v1beta2"""
    BASE_URL = BASE_URL

    def __init__(self, http, **kwargs) -> None:
        super().__init__(http, **kwargs)
        self.callsets = CallsetsService(self)
        self.datasets = DatasetsService(self)
        self.experimental = ExperimentalService(self)
        self.jobs = JobsService(self)
        self.references = ReferencesService(self)
        self.variants = VariantsService(self)
        self.variantsets = VariantsetsService(self)
