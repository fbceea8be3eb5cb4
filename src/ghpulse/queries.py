PULL_REQUESTS_WITH_COMMENTS_QUERY = """
query GetPullRequestsWithComments(
  $owner: String!
  $repo: String!
  $since: DateTime!
  $first: Int!
  $after: String
) {
  repository(owner: $owner, name: $repo) {
    pullRequests(
      first: $first
      after: $after
      orderBy: {field: UPDATED_AT, direction: DESC}
      filterBy: {since: $since}
    ) {
      nodes {
        id
        number
        title
        body
        state
        createdAt
        updatedAt
        mergedAt
        url
        author {
          login
          ... on User {
            name
            email
            avatarUrl
          }
        }
        comments(first: 100) {
          nodes {
            id
            body
            createdAt
            updatedAt
            url
            author {
              login
              ... on User {
                name
                email
                avatarUrl
              }
            }
          }
          totalCount
        }
        reviewComments(first: 100) {
          nodes {
            id
            body
            createdAt
            updatedAt
            path
            line
            originalLine
            url
            author {
              login
              ... on User {
                name
                email
                avatarUrl
              }
            }
          }
          totalCount
        }
      }
      pageInfo {
        hasNextPage
        endCursor
      }
      totalCount
    }
  }
}
"""
