from pydantic import BaseModel


class BookItem(BaseModel):
    url: str
    thumbnail: str
    name: str


class LibraryResponse(BaseModel):
    books: list[BookItem]
