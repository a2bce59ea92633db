"""GraphQL documents for the Shopify Storefront API.

Shared fragments are defined once and appended to every document that spreads
them, so all operations returning the same object select the same fields.
"""

# ---------------------------------------------------------------------------
# Fragments
# ---------------------------------------------------------------------------

IMAGE_FRAGMENT = """
  fragment ImageFragment on Image {
    url
    altText
    width
    height
  }
"""

PAGE_INFO_FRAGMENT = """
  fragment PageInfoFragment on PageInfo {
    hasNextPage
    hasPreviousPage
    startCursor
    endCursor
  }
"""

CART_FRAGMENT = """
  fragment CartFragment on Cart {
    id
    checkoutUrl
    createdAt
    updatedAt
    lines(first: 100) {
      edges {
        node {
          id
          quantity
          merchandise {
            ... on ProductVariant {
              id
              title
              availableForSale
              image {
                ...ImageFragment
              }
              price {
                amount
                currencyCode
              }
              product {
                title
                handle
              }
            }
          }
        }
      }
    }
    cost {
      totalAmount {
        amount
        currencyCode
      }
      subtotalAmount {
        amount
        currencyCode
      }
      totalTaxAmount {
        amount
        currencyCode
      }
    }
    totalQuantity
  }
"""

ADDRESS_FRAGMENT = """
  fragment AddressFragment on MailingAddress {
    id
    firstName
    lastName
    company
    address1
    address2
    city
    province
    country
    zip
    phone
  }
"""

CUSTOMER_FRAGMENT = """
  fragment CustomerFragment on Customer {
    id
    email
    firstName
    lastName
    displayName
    phone
    defaultAddress {
      ...AddressFragment
    }
    addresses(first: 10) {
      edges {
        node {
          ...AddressFragment
        }
      }
    }
  }
"""

ORDER_FRAGMENT = """
  fragment OrderFragment on Order {
    id
    orderNumber
    name
    processedAt
    financialStatus
    fulfillmentStatus
    totalPrice {
      amount
      currencyCode
    }
    lineItems(first: 10) {
      edges {
        node {
          title
          quantity
          variant {
            title
            image {
              ...ImageFragment
            }
            price {
              amount
              currencyCode
            }
          }
        }
      }
    }
  }
"""

PRODUCT_FRAGMENT = """
  fragment ProductFragment on Product {
    id
    title
    handle
    description
    descriptionHtml
    vendor
    productType
    tags
    featuredImage {
      ...ImageFragment
    }
    images(first: 10) {
      edges {
        node {
          ...ImageFragment
        }
      }
    }
    options {
      name
      values
    }
    variants(first: 10) {
      edges {
        node {
          id
          title
          sku
          availableForSale
          quantityAvailable
          price {
            amount
            currencyCode
          }
          compareAtPrice {
            amount
            currencyCode
          }
          selectedOptions {
            name
            value
          }
          image {
            ...ImageFragment
          }
        }
      }
    }
  }
"""

COLLECTION_FRAGMENT = """
  fragment CollectionFragment on Collection {
    id
    title
    handle
    description
    descriptionHtml
    image {
      ...ImageFragment
    }
    updatedAt
  }
"""

# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------

GET_CART_QUERY = f"""
  query getCart($cartId: ID!) {{
    cart(id: $cartId) {{
      ...CartFragment
    }}
  }}
  {CART_FRAGMENT}
  {IMAGE_FRAGMENT}
"""

CREATE_CART_MUTATION = f"""
  mutation cartCreate($input: CartInput!) {{
    cartCreate(input: $input) {{
      cart {{
        ...CartFragment
      }}
      userErrors {{
        field
        message
      }}
    }}
  }}
  {CART_FRAGMENT}
  {IMAGE_FRAGMENT}
"""

ADD_TO_CART_MUTATION = f"""
  mutation cartLinesAdd($cartId: ID!, $lines: [CartLineInput!]!) {{
    cartLinesAdd(cartId: $cartId, lines: $lines) {{
      cart {{
        ...CartFragment
      }}
      userErrors {{
        field
        message
      }}
    }}
  }}
  {CART_FRAGMENT}
  {IMAGE_FRAGMENT}
"""

REMOVE_FROM_CART_MUTATION = f"""
  mutation cartLinesRemove($cartId: ID!, $lineIds: [ID!]!) {{
    cartLinesRemove(cartId: $cartId, lineIds: $lineIds) {{
      cart {{
        ...CartFragment
      }}
      userErrors {{
        field
        message
      }}
    }}
  }}
  {CART_FRAGMENT}
  {IMAGE_FRAGMENT}
"""

UPDATE_CART_MUTATION = f"""
  mutation cartLinesUpdate($cartId: ID!, $lines: [CartLineUpdateInput!]!) {{
    cartLinesUpdate(cartId: $cartId, lines: $lines) {{
      cart {{
        ...CartFragment
      }}
      userErrors {{
        field
        message
      }}
    }}
  }}
  {CART_FRAGMENT}
  {IMAGE_FRAGMENT}
"""

# ---------------------------------------------------------------------------
# Customer
# ---------------------------------------------------------------------------

CREATE_CUSTOMER_MUTATION = """
  mutation customerCreate($input: CustomerCreateInput!) {
    customerCreate(input: $input) {
      customer {
        id
        email
        firstName
        lastName
        displayName
      }
      customerUserErrors {
        code
        field
        message
      }
    }
  }
"""

CREATE_CUSTOMER_ACCESS_TOKEN_MUTATION = """
  mutation customerAccessTokenCreate($input: CustomerAccessTokenCreateInput!) {
    customerAccessTokenCreate(input: $input) {
      customerAccessToken {
        accessToken
        expiresAt
      }
      customerUserErrors {
        code
        field
        message
      }
    }
  }
"""

REVOKE_CUSTOMER_ACCESS_TOKEN_MUTATION = """
  mutation customerAccessTokenRevoke($customerAccessToken: String!) {
    customerAccessTokenRevoke(customerAccessToken: $customerAccessToken) {
      deletedAccessToken
      deletedCustomerAccessTokenId
      userErrors {
        field
        message
      }
    }
  }
"""

GET_CUSTOMER_QUERY = f"""
  query getCustomer($customerAccessToken: String!) {{
    customer(customerAccessToken: $customerAccessToken) {{
      ...CustomerFragment
      orders(first: 10, sortKey: PROCESSED_AT, reverse: true) {{
        edges {{
          node {{
            ...OrderFragment
          }}
        }}
      }}
    }}
  }}
  {CUSTOMER_FRAGMENT}
  {ADDRESS_FRAGMENT}
  {ORDER_FRAGMENT}
  {IMAGE_FRAGMENT}
"""

GET_CUSTOMER_ORDERS_QUERY = f"""
  query getCustomerOrders($customerAccessToken: String!, $first: Int!) {{
    customer(customerAccessToken: $customerAccessToken) {{
      orders(first: $first, sortKey: PROCESSED_AT, reverse: true) {{
        edges {{
          node {{
            ...OrderFragment
          }}
        }}
        pageInfo {{
          ...PageInfoFragment
        }}
      }}
    }}
  }}
  {ORDER_FRAGMENT}
  {IMAGE_FRAGMENT}
  {PAGE_INFO_FRAGMENT}
"""

# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------

GET_PRODUCT_BY_HANDLE_QUERY = f"""
  query getProductByHandle($handle: String!) {{
    product(handle: $handle) {{
      ...ProductFragment
    }}
  }}
  {PRODUCT_FRAGMENT}
  {IMAGE_FRAGMENT}
"""

GET_PRODUCTS_QUERY = f"""
  query getProducts($first: Int!, $after: String, $sortKey: ProductSortKeys, $reverse: Boolean, $query: String) {{
    products(first: $first, after: $after, sortKey: $sortKey, reverse: $reverse, query: $query) {{
      edges {{
        cursor
        node {{
          ...ProductFragment
        }}
      }}
      pageInfo {{
        ...PageInfoFragment
      }}
    }}
  }}
  {PRODUCT_FRAGMENT}
  {IMAGE_FRAGMENT}
  {PAGE_INFO_FRAGMENT}
"""

# ---------------------------------------------------------------------------
# Collections
# ---------------------------------------------------------------------------

GET_COLLECTIONS_QUERY = f"""
  query getCollections($first: Int!, $after: String) {{
    collections(first: $first, after: $after) {{
      pageInfo {{
        ...PageInfoFragment
      }}
      edges {{
        cursor
        node {{
          ...CollectionFragment
        }}
      }}
    }}
  }}
  {COLLECTION_FRAGMENT}
  {IMAGE_FRAGMENT}
  {PAGE_INFO_FRAGMENT}
"""

GET_COLLECTION_BY_HANDLE_QUERY = f"""
  query getCollectionByHandle($handle: String!, $first: Int!, $after: String, $sortKey: ProductCollectionSortKeys!, $reverse: Boolean!) {{
    collection(handle: $handle) {{
      ...CollectionFragment
      products(first: $first, after: $after, sortKey: $sortKey, reverse: $reverse) {{
        pageInfo {{
          ...PageInfoFragment
        }}
        edges {{
          cursor
          node {{
            ...ProductFragment
          }}
        }}
      }}
    }}
  }}
  {COLLECTION_FRAGMENT}
  {PRODUCT_FRAGMENT}
  {IMAGE_FRAGMENT}
  {PAGE_INFO_FRAGMENT}
"""

CATALOG: dict[str, str] = {
    "getCart": GET_CART_QUERY,
    "cartCreate": CREATE_CART_MUTATION,
    "cartLinesAdd": ADD_TO_CART_MUTATION,
    "cartLinesRemove": REMOVE_FROM_CART_MUTATION,
    "cartLinesUpdate": UPDATE_CART_MUTATION,
    "customerCreate": CREATE_CUSTOMER_MUTATION,
    "customerAccessTokenCreate": CREATE_CUSTOMER_ACCESS_TOKEN_MUTATION,
    "customerAccessTokenRevoke": REVOKE_CUSTOMER_ACCESS_TOKEN_MUTATION,
    "getCustomer": GET_CUSTOMER_QUERY,
    "getCustomerOrders": GET_CUSTOMER_ORDERS_QUERY,
    "getProductByHandle": GET_PRODUCT_BY_HANDLE_QUERY,
    "getProducts": GET_PRODUCTS_QUERY,
    "getCollections": GET_COLLECTIONS_QUERY,
    "getCollectionByHandle": GET_COLLECTION_BY_HANDLE_QUERY,
}
