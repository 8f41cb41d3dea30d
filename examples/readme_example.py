from protochain import PrototypeResolver, ResolverSettings

resolver = PrototypeResolver(settings=ResolverSettings(warn_on_shadow=True))

# Shapes share "sides" through the chain instead of copying it
quad = resolver.handle(resolver.create_from(None, sides=4, name="quadrilateral"))
rect = quad.create_child(name="rectangle")
square = rect.create_child(name="square")

for shape in (quad, rect, square):
    owner = resolver.find_owner(shape.id, "sides")
    print(f"{shape['name']}: sides={shape['sides']} (own={shape.has_own('sides')}, from {owner})")

# Shadow the inherited value; this emits a ShadowingWarning
square["sides"] = 4
quad["sides"] = 99

print(f"square sides after quad changed: {square['sides']}")
print(f"rectangle sides after quad changed: {rect['sides']}")
print(f"square sees: {square.keys()}")
