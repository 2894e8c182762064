"""GraphQL adapter – query templates by id."""
from __future__ import annotations

from typing import Mapping

from people_search.application.search.query import PEOPLE_SEARCH_ADVANCED
from people_search.kernel.errors import ValidationError

__all__ = ["DEFAULT_TEMPLATES", "PEOPLE_SEARCH_ADVANCED_QUERY", "resolve_template"]

PEOPLE_SEARCH_ADVANCED_QUERY = """
query PeopleSearchAdvanced(
  $language: String!
  $rootItem: String!
  $pageSize: Int
  $cursorValueToGetItemsAfter: String
  $query: String
  $fieldsEqual: [ItemSearchFieldQuery]
  $facetOn: [String!]
) {
  search(
    rootItem: $rootItem
    language: $language
    first: $pageSize
    after: $cursorValueToGetItemsAfter
    keyword: $query
    fieldsEqual: $fieldsEqual
    facetOn: $facetOn
  ) {
    facets {
      name
      values {
        value
        count
      }
    }
    results {
      items {
        item {
          ... on Person {
            firstName { value }
            lastName { value }
            email { value }
            introduction { value }
            url
            country { targetItem { name } }
            mvpAwards
          }
        }
      }
      totalCount
      pageInfo {
        startCursor
        endCursor
        hasNextPage
        hasPreviousPage
      }
    }
  }
}
"""

DEFAULT_TEMPLATES: Mapping[str, str] = {
    PEOPLE_SEARCH_ADVANCED: PEOPLE_SEARCH_ADVANCED_QUERY,
}


def resolve_template(template_id: str, templates: Mapping[str, str] = DEFAULT_TEMPLATES) -> str:
    try:
        return templates[template_id]
    except KeyError:
        raise ValidationError.for_field("template_id", template_id, "unknown query template") from None
