from rest_framework.filters import SearchFilter


class PhraseSearchFilter(SearchFilter):
    """
    Search filter that matches the whole ``search`` value as one phrase,
    so "Nguyen Van" does not also match every "Van".
    """

    def get_search_terms(self, request):
        params = request.query_params.get(self.search_param, "").strip()
        return [params] if params else []
