from apps.weddings.dal.content_dal import EventDAL
from apps.weddings.dal.content_dal import GalleryDAL
from apps.weddings.dal.content_dal import MenuConfigDAL
from apps.weddings.dal.wedding_dal import WeddingDAL

__all__ = [
    'EventDAL',
    'GalleryDAL',
    'MenuConfigDAL',
    'WeddingDAL',
]
