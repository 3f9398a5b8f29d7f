from models.search import PaginationData


class PaginationController:
    """
    Active query and page for one search session.

    The provider never reports how many results exist, so there is always a
    next page; an exhausted query shows up as placeholder or empty results.
    """

    def __init__(self):
        self.active_query = ""
        self.active_page = 1

    def start_new_search(self, query: str) -> None:
        self.active_query = query
        self.active_page = 1

    def go_to_page(self, page: int) -> None:
        if page < 1:
            return
        self.active_page = page

    def next_page(self) -> None:
        self.active_page += 1

    def previous_page(self) -> None:
        self.active_page = max(1, self.active_page - 1)

    def reset_page(self) -> None:
        self.active_page = 1

    @staticmethod
    def pagination_data(page: int) -> PaginationData:
        return PaginationData(
            current_page=page,
            total_pages=-1,
            has_next_page=True,
            has_previous_page=page > 1,
        )
