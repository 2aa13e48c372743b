from typing import List

from ..client.data_service_client import DataServiceClient
from ..schemas.data_schemas import CategoryDTO
from .service_errors import data_service_errors


class CategoryBusinessService:

    def __init__(self, client: DataServiceClient):
        self.client = client

    def get_all_categories(self) -> List[CategoryDTO]:
        with data_service_errors("fetching categories"):
            return self.client.get_categories()
