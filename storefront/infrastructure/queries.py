"""GraphQL documents sent to the storefront API."""

# Metaobject fields shared by every level of the category tree
CATEGORY_BASIC_FIELDS = """
  fragment CategoryBasicFields on Metaobject {
    id
    handle
    name: field(key: "name") {
      value
    }
    description: field(key: "description") {
      value
    }
    image: field(key: "image") {
      reference {
        ... on MediaImage {
          image {
            id
            url
            altText
            width
            height
          }
        }
      }
    }
    collection: field(key: "collection") {
      reference {
        ... on Collection {
          handle
        }
      }
    }
  }
"""

# GraphQL has no recursive fragments, so the tree is fetched three levels deep:
# the requested category, its children and its grandchildren.
CATEGORY_QUERY = (
    CATEGORY_BASIC_FIELDS
    + """
  fragment CategoryChildFields on Metaobject {
    ...CategoryBasicFields
    subCategories: field(key: "children_categories") {
      references(first: 250) {
        nodes {
          ... on Metaobject {
            ...CategoryBasicFields
          }
        }
      }
    }
  }

  query CategoryMetaobject($handle: String!, $type: String!) {
    category: metaobject(handle: {handle: $handle, type: $type}) {
      ...CategoryBasicFields
      subCategories: field(key: "children_categories") {
        references(first: 250) {
          nodes {
            ... on Metaobject {
              ...CategoryChildFields
            }
          }
        }
      }
    }
  }
"""
)

PRODUCT_ITEM_FRAGMENT = """
  fragment MoneyProductItem on MoneyV2 {
    amount
    currencyCode
  }

  fragment ProductItem on Product {
    id
    handle
    title
    descriptionHtml
    featuredImage {
      id
      altText
      url
      width
      height
    }
    priceRange {
      minVariantPrice {
        ...MoneyProductItem
      }
      maxVariantPrice {
        ...MoneyProductItem
      }
    }
    options(first: 250) {
      name
    }
    variants(first: 250) {
      nodes {
        id
        sku
        selectedOptions {
          name
          value
        }
        title
        weight
        price {
          ...MoneyProductItem
        }
      }
    }
  }
"""

COLLECTION_QUERY = (
    PRODUCT_ITEM_FRAGMENT
    + """
  query Collection(
    $handle: String!
    $first: Int
    $last: Int
    $startCursor: String
    $endCursor: String
  ) {
    collection(handle: $handle) {
      id
      handle
      title
      description
      products(
        first: $first,
        last: $last,
        before: $startCursor,
        after: $endCursor
      ) {
        nodes {
          ...ProductItem
        }
        pageInfo {
          hasPreviousPage
          hasNextPage
          endCursor
          startCursor
        }
      }
    }
  }
"""
)
