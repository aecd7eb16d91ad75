"""Cypher statements for the person read path.

Both resolution statements return at most one row per resolved person with
two columns: `person` (a map) and `memberships` (a list of
{membership, organisation, roles} maps ordered by organisation id, descending).
"""

# Shared tail: memberships hang off `source` nodes, the organisation node is
# bound to `o` and its public id to `org_id` by the caller-specific prefix.
_MEMBERSHIP_ROLES = (
    "OPTIONAL MATCH (m)-[rr:HAS_ROLE]->(r:Role) "
    "WITH person_node, person_id, m, o, org_id, "
    "     collect({id: r.uuid, types: labels(r), prefLabel: r.prefLabel, "
    "              inceptionDate: rr.inceptionDate, terminationDate: rr.terminationDate}) AS roles "
    "ORDER BY org_id DESC "
    "WITH person_node, person_id, "
    "     collect({"
    "       membership: {id: m.uuid, types: labels(m), prefLabel: m.prefLabel, title: m.title, "
    "                    inceptionDate: m.inceptionDate, terminationDate: m.terminationDate}, "
    "       organisation: {id: org_id, types: labels(o), prefLabel: o.prefLabel, labels: o.aliases}, "
    "       roles: roles"
    "     }) AS memberships "
    "RETURN {id: person_id, types: labels(person_node), prefLabel: person_node.prefLabel, "
    "        labels: person_node.aliases, birthYear: person_node.birthYear, "
    "        salutation: person_node.salutation, emailAddress: person_node.emailAddress, "
    "        twitterHandle: person_node.twitterHandle, facebookProfile: person_node.facebookProfile, "
    "        linkedinProfile: person_node.linkedinProfile, imageUrl: person_node.imageUrl, "
    "        description: person_node.description, descriptionXML: person_node.descriptionXML} AS person, "
    "       memberships"
)

# Identifier -> source person -> canonical person; memberships are gathered
# from every source node concorded to the canonical one, and organisations
# are reported by their canonical id when they have one.
READ_PERSON_CANONICAL = (
    "MATCH (:UPPIdentifier {value: $uuid})-[:IDENTIFIES]->(:Person)-[:EQUIVALENT_TO]->(canonical:Person) "
    "WITH DISTINCT canonical "
    "OPTIONAL MATCH (canonical)<-[:EQUIVALENT_TO]-(:Person)<-[:HAS_MEMBER]-(m:Membership) "
    "OPTIONAL MATCH (m)-[:HAS_ORGANISATION]->(org:Organisation) "
    "OPTIONAL MATCH (org)-[:EQUIVALENT_TO]->(canonicalOrg:Organisation) "
    "WITH canonical AS person_node, coalesce(canonical.prefUUID, canonical.uuid) AS person_id, m, "
    "     coalesce(canonicalOrg, org) AS o, "
    "     coalesce(canonicalOrg.prefUUID, org.uuid) AS org_id "
    + _MEMBERSHIP_ROLES
)

# Fallback for people not yet concorded: identifier -> person, no equivalence.
READ_PERSON_DIRECT = (
    "MATCH (:UPPIdentifier {value: $uuid})-[:IDENTIFIES]->(p:Person) "
    "WITH DISTINCT p "
    "OPTIONAL MATCH (p)<-[:HAS_MEMBER]-(m:Membership) "
    "OPTIONAL MATCH (m)-[:HAS_ORGANISATION]->(o:Organisation) "
    "WITH p AS person_node, p.uuid AS person_id, m, o, o.uuid AS org_id "
    + _MEMBERSHIP_ROLES
)

CHECK_CONNECTIVITY = "MATCH (p:Person) RETURN p.uuid AS uuid LIMIT 1"
