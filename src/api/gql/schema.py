"""GraphQL schema for the user directory.

Queries:
- getAllUsers(id: Int): every user; ``id`` is accepted and ignored
- findUserById(id: Int!): one user or null

Mutations:
- createUser(firstName, lastName, email, password): the created user
"""

import strawberry
from fastapi import Depends
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from api.dependencies import get_user_repo
from domain.model.user import User
from port.user_repository import UserRepository
from services import user_service


@strawberry.type(name="User")
class UserType:
    id: int
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    password: str | None = None

    @classmethod
    def from_domain(cls, user: User) -> "UserType":
        return cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            password=user.password,
        )


def _repo(info: Info) -> UserRepository:
    return info.context["user_repo"]


@strawberry.type
class Query:
    @strawberry.field(description="fetch all users")
    def get_all_users(self, info: Info, id: int | None = None) -> list[UserType]:
        # id is part of the public field signature but does not filter
        return [UserType.from_domain(user) for user in user_service.get_all(_repo(info))]

    @strawberry.field(description="fetch single user")
    def find_user_by_id(self, info: Info, id: int) -> UserType | None:
        user = user_service.find_by_id(_repo(info), id)
        return UserType.from_domain(user) if user is not None else None


@strawberry.type
class Mutation:
    @strawberry.mutation
    def create_user(
        self,
        info: Info,
        first_name: str | None = None,
        last_name: str | None = None,
        email: str | None = None,
        password: str | None = None,
    ) -> UserType:
        user = user_service.create_user(
            _repo(info),
            first_name=first_name,
            last_name=last_name,
            email=email,
            password=password,
        )
        return UserType.from_domain(user)


schema = strawberry.Schema(query=Query, mutation=Mutation)


async def get_context(repo: UserRepository = Depends(get_user_repo)) -> dict:
    """Build the GraphQL context from FastAPI dependencies."""
    return {"user_repo": repo}


def create_graphql_router(graphiql: bool = True) -> GraphQLRouter:
    return GraphQLRouter(schema, context_getter=get_context, graphql_ide="graphiql" if graphiql else None)
