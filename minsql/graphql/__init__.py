"""GraphQL schema generation, query resolution and subscriptions."""