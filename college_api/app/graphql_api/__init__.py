"""
GraphQL surface of the college API, served at ``/graphql``.
"""
