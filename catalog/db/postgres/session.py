from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import DeclarativeBase
from catalog.core.config import settings

class Base(DeclarativeBase):
    pass

def make_engine(url: str, **kwargs) -> AsyncEngine:
    return create_async_engine(url, echo=False, **kwargs)

def make_sessionmaker(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind, expire_on_commit=False, class_=AsyncSession)

engine = make_engine(settings.postgres_url)

async_session: async_sessionmaker[AsyncSession] = make_sessionmaker(engine)
