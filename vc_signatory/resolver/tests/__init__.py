DOC = {
    "@context": "https://www.w3.org/ns/did/v1",
    "id": "did:example:123",
    "verificationMethod": [
        {
            "id": "did:example:123#key-1",
            "type": "Ed25519VerificationKey2018",
            "controller": "did:example:123",
            "publicKeyBase58": "3Dn1SJNPaCXcvvJvSbsFWP2xaCjMom3can8CQNhWrTRx",
        },
        {
            "id": "did:example:123#key-2",
            "type": "Ed25519VerificationKey2018",
            "controller": "did:example:123",
            "publicKeyBase58": "3Dn1SJNPaCXcvvJvSbsFWP2xaCjMom3can8CQNhWrTRy",
        },
        {
            "id": "did:example:123#key-3",
            "type": "X25519KeyAgreementKey2019",
            "controller": "did:example:123",
            "publicKeyBase58": "JhNWeSVLMYccCk7iopQW4guaSJTojqpMEELgSLhKwRr",
        },
    ],
    "assertionMethod": ["did:example:123#key-1", "did:example:123#key-2"],
    "authentication": [
        {
            "id": "did:example:123#auth",
            "type": "Ed25519VerificationKey2018",
            "controller": "did:example:123",
            "publicKeyBase58": "H3C2AVvLMv6gmMNam3uVAjZpfkcJCwDwnZn6z3wXmqPV",
        },
        "did:example:123#key-2",
    ],
    "capabilityDelegation": ["#key-2"],
    "capabilityInvocation": [],
    "keyAgreement": ["did:example:123#key-3"],
}
